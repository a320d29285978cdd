from setuptools import setup
import sys

if sys.version_info < (3,10):
    sys.exit('Sorry, Python < 3.10 is not supported')

setup(name='missionspec',
      version='0.1.0',
      packages=['missionspec'],

      install_requires=['pydantic>=2'],
      extras_require={'test': ['pytest']}
)
