from missionspec import MissionSpec


TWO_AGENT_MISSION = '''<?xml version="1.0" encoding="UTF-8" standalone="no" ?>
<Mission xmlns="http://ProjectMalmo.microsoft.com" xmlns:xsi="http://www.w3.org/2001/XMLSchema-instance">
  <About>
    <Summary>Two agents</Summary>
  </About>
  <ServerSection>
    <ServerHandlers>
      <FlatWorldGenerator generatorString="3;7,220*1,5*3,2;3;,biome_1"/>
      <ServerQuitFromTimeUp timeLimitMs="20000"/>
      <ServerQuitWhenAnyAgentFinishes/>
    </ServerHandlers>
  </ServerSection>
  <AgentSection mode="Survival">
    <Name>Alice</Name>
    <AgentStart>
      <Placement x="0.5" y="4" z="0.5"/>
    </AgentStart>
    <AgentHandlers>
      <ObservationFromFullStats/>
      <DiscreteMovementCommands>
        <ModifierList type="deny-list">
          <command>attack</command>
          <command>jump</command>
        </ModifierList>
      </DiscreteMovementCommands>
      <InventoryCommands>
        <ModifierList type="deny-list">
          <command>discardCurrentItem</command>
        </ModifierList>
      </InventoryCommands>
    </AgentHandlers>
  </AgentSection>
  <AgentSection mode="Creative">
    <Name>Bob</Name>
    <AgentStart/>
    <AgentHandlers>
      <VideoProducer want_depth="true">
        <Width>640</Width>
        <Height>480</Height>
      </VideoProducer>
      <ContinuousMovementCommands/>
    </AgentHandlers>
  </AgentSection>
</Mission>
'''


def full_mission():
    """A single agent mission using every builder call."""
    spec = MissionSpec()
    spec.setSummary('Lumberjack')
    spec.timeLimitInSeconds(30.5)
    spec.setTimeOfDay(6000, False)
    spec.setWorldSeed('42')
    spec.forceWorldReset()
    spec.drawCuboid(-5, 4, -5, 5, 10, 5, 'air')
    spec.drawBlock(1, 4, 1, 'log')
    spec.drawItem(2, 4, 2, 'diamond')
    spec.drawSphere(0, 20, 0, 3, 'glass')
    spec.drawLine(-2, 4, -2, 2, 4, 2, 'redstone_block')
    spec.startAtWithPitchAndYaw(0.5, 4, 0.5, 30, 90)
    spec.endAt(10, 4, 10)
    spec.endAt(-10, 4, -10, 2.5)
    spec.setModeToCreative()
    spec.requestVideoWithDepth(320, 240)
    spec.requestColourMap(160, 120)
    spec.rewardForReachingPosition(5, 4, 5, 100, 1.5)
    spec.rewardForReachingPosition(6, 4, 6, -10.25, 1)
    spec.observeRecentCommands()
    spec.observeGrid(-1, -1, -1, 1, 1, 1, 'floor')
    spec.observeDistance(0.5, 4, 0.5, 'Start')
    spec.observeHotBar()
    spec.observeFullInventory()
    spec.observeChat()
    spec.allowContinuousMovementCommand('move')
    spec.allowContinuousMovementCommand('turn')
    spec.allowAllDiscreteMovementCommands()
    spec.allowAbsoluteMovementCommand('tpx')
    spec.allowAllInventoryCommands()
    spec.allowAllChatCommands()
    return spec
