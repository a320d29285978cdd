MALMO_NAMESPACE = 'http://ProjectMalmo.microsoft.com'
XMLNS_XSI = "http://www.w3.org/2001/XMLSchema-instance"

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" standalone="no" ?>'

DEFAULT_AGENT_NAME = 'Cristina'
DEFAULT_TIME_LIMIT_MS = 10000
DEFAULT_END_TOLERANCE = 1.0
TIME_LIMIT_DESCRIPTION = 'Time limit'

SURVIVAL = 'Survival'
CREATIVE = 'Creative'
SPECTATOR = 'Spectator'

ALLOW_LIST = 'allow-list'
DENY_LIST = 'deny-list'

# channels of a video frame with and without the depth plane
RGB_CHANNELS = 3
RGBD_CHANNELS = 4
