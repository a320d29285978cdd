import random
import unittest
from missionspec import MissionSpec, CommandCategory, AllowList, DenyList
from base_test import BaseTest
from common import TWO_AGENT_MISSION


class TestCommandHandlers(BaseTest):

    def test_allow_all_creates_unrestricted_handler(self):
        spec = MissionSpec()
        spec.allowAllContinuousMovementCommands()
        self.assertEqual(spec.getListOfCommandHandlers(0), ['ContinuousMovement'])
        self.assertEqual(self.handler(spec, CommandCategory.CONTINUOUS_MOVEMENT).modifier, None)
        self.assertEqual(spec.getAllowedCommands(0, 'ContinuousMovement'), [])

    def test_allow_verb_is_set_like(self):
        spec = MissionSpec()
        spec.allowContinuousMovementCommand('move')
        spec.allowContinuousMovementCommand('turn')
        spec.allowContinuousMovementCommand('move')
        self.assertEqual(spec.getAllowedCommands(0, 'ContinuousMovement'), ['move', 'turn'])
        self.assertEqual(self.handler(spec, CommandCategory.CONTINUOUS_MOVEMENT).modifier,
                         AllowList(['move', 'turn']))

    def test_allow_all_clears_allow_list(self):
        spec = MissionSpec()
        spec.allowDiscreteMovementCommand('movenorth')
        spec.allowAllDiscreteMovementCommands()
        self.assertEqual(self.handler(spec, CommandCategory.DISCRETE_MOVEMENT).modifier, None)
        spec.allowAllDiscreteMovementCommands()
        self.assertEqual(spec.getListOfCommandHandlers(0), ['DiscreteMovement'])

    def test_remove_all(self):
        spec = MissionSpec()
        spec.allowAllChatCommands()
        spec.allowInventoryCommand('swapInventoryItems')
        spec.allowAbsoluteMovementCommand('tpx')
        self.assertEqual(spec.getListOfCommandHandlers(0), ['Chat', 'Inventory', 'AbsoluteMovement'])
        spec.removeAllCommandHandlers()
        self.assertEqual(spec.getListOfCommandHandlers(0), [])
        spec.removeAllCommandHandlers()
        self.assertEqual(spec.getListOfCommandHandlers(0), [])

    def test_allow_supersedes_deny(self):
        spec = MissionSpec(TWO_AGENT_MISSION, True)
        self.assertEqual(self.handler(spec, CommandCategory.DISCRETE_MOVEMENT).modifier,
                         DenyList(['attack', 'jump']))
        self.assertEqual(spec.getAllowedCommands(0, 'DiscreteMovement'), [])
        spec.allowDiscreteMovementCommand('movenorth')
        self.assertEqual(self.handler(spec, CommandCategory.DISCRETE_MOVEMENT).modifier,
                         AllowList(['movenorth']))

    def test_allow_all_clears_deny_list(self):
        spec = MissionSpec(TWO_AGENT_MISSION, True)
        spec.allowAllInventoryCommands()
        self.assertEqual(self.handler(spec, CommandCategory.INVENTORY).modifier, None)

    def test_allow_deny_exclusive_after_random_sequences(self):
        rng = random.Random(1234)
        verbs = ['move', 'turn', 'jump', 'attack', 'use', 'tpx', 'hotbar.1']
        operations = [
            lambda s: s.removeAllCommandHandlers(),
            lambda s: s.allowAllContinuousMovementCommands(),
            lambda s: s.allowAllDiscreteMovementCommands(),
            lambda s: s.allowAllAbsoluteMovementCommands(),
            lambda s: s.allowAllInventoryCommands(),
            lambda s: s.allowAllChatCommands(),
            lambda s: s.allowContinuousMovementCommand(rng.choice(verbs)),
            lambda s: s.allowDiscreteMovementCommand(rng.choice(verbs)),
            lambda s: s.allowAbsoluteMovementCommand(rng.choice(verbs)),
            lambda s: s.allowInventoryCommand(rng.choice(verbs)),
        ]
        for _ in range(20):
            spec = MissionSpec(TWO_AGENT_MISSION, True)
            for _ in range(30):
                rng.choice(operations)(spec)
                self.assertHandlersExclusive(spec)
            self.assertRoundTrip(spec)

    def test_verbs_are_kept_verbatim(self):
        spec = MissionSpec()
        spec.allowContinuousMovementCommand(' move')
        spec.allowContinuousMovementCommand('move')
        spec.allowInventoryCommand('')
        self.assertEqual(spec.getAllowedCommands(0, 'ContinuousMovement'), [' move', 'move'])
        self.assertEqual(spec.getAllowedCommands(0, 'Inventory'), [''])
        self.assertHandlersExclusive(spec)
        self.assertRoundTrip(spec)

    def test_unknown_handler_name(self):
        spec = MissionSpec()
        with self.assertRaises(ValueError):
            spec.getAllowedCommands(0, 'Teleport')


if __name__ == '__main__':
    unittest.main()
