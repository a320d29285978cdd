import unittest
from missionspec import MissionSpec, SchemaViolation, MissionErrorCode
from missionspec import schema
from base_test import BaseTest
from common import TWO_AGENT_MISSION, full_mission


class TestSchema(BaseTest):

    def check_violation(self, text):
        with self.assertRaises(SchemaViolation) as cm:
            MissionSpec(text, True)
        self.assertEqual(cm.exception.code, MissionErrorCode.MISSION_SCHEMA_VIOLATION)
        self.assertTrue(len(cm.exception.details) > 0)
        return cm.exception

    def test_generated_documents_validate(self):
        model = schema.validate(full_mission().getAsXML(True))
        agent = model.AgentSection[0]
        self.assertEqual(agent.mode, 'Creative')
        self.assertEqual(agent.AgentHandlers.VideoProducer.Width.text, 320)
        self.assertEqual(len(model.ServerSection.ServerHandlers.DrawingDecorator.DrawBlock), 1)
        model = schema.validate(MissionSpec().getAsXML(False))
        self.assertEqual(model.AgentSection[0].Name.text, 'Cristina')

    def test_two_agent_document(self):
        model = schema.validate(TWO_AGENT_MISSION)
        self.assertEqual(len(model.AgentSection), 2)
        commands = model.AgentSection[0].AgentHandlers.DiscreteMovementCommands
        self.assertEqual(commands.ModifierList.type, 'deny-list')
        self.assertEqual([c.text for c in commands.ModifierList.command], ['attack', 'jump'])

    def test_bad_attribute_type(self):
        spec = MissionSpec()
        spec.drawBlock(1, 2, 3, 'stone')
        text = spec.getAsXML(False).replace('x="1"', 'x="east"')
        self.check_violation(text)

    def test_bad_mode(self):
        self.check_violation(TWO_AGENT_MISSION.replace('mode="Creative"', 'mode="Adventure"'))

    def test_bad_modifier_list_type(self):
        self.check_violation(TWO_AGENT_MISSION.replace('type="deny-list"', 'type="grey-list"'))

    def test_world_generator_required(self):
        self.check_violation(TWO_AGENT_MISSION.replace(
            '<FlatWorldGenerator generatorString="3;7,220*1,5*3,2;3;,biome_1"/>', ''))

    def test_single_world_generator(self):
        self.check_violation(TWO_AGENT_MISSION.replace(
            '<FlatWorldGenerator', '<DefaultWorldGenerator/><FlatWorldGenerator'))

    def test_agent_section_required(self):
        spec = MissionSpec()
        text = spec.getAsXML(True)
        start = text.index('<AgentSection')
        end = text.index('</AgentSection>') + len('</AgentSection>')
        self.check_violation(text[:start] + text[end:])
        spec = MissionSpec(text[:start] + text[end:], False)
        self.assertEqual(spec.getNumberOfAgents(), 0)

    def test_wrong_root(self):
        self.check_violation('<MissionInit xmlns="http://ProjectMalmo.microsoft.com"/>')

    def test_not_well_formed(self):
        error = self.check_violation('<Mission><About>')
        self.assertIn('not well formed', str(error))


if __name__ == '__main__':
    unittest.main()
