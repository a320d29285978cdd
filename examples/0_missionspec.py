from missionspec import MissionSpec
import missionspec.mission_builder as mb

# a flat world with a 20 second time limit
spec = MissionSpec()
spec.setSummary("Walk to the gold")
spec.timeLimitInSeconds(20)
spec.setTimeOfDay(6000, False)

# we can draw the arena
spec.drawCuboid(-5, 4, -5, 5, 4, 5, "sandstone")
spec.drawBlock(4, 5, 4, "gold_block")
spec.drawSphere(0, 12, 0, 3, "glass")

spec.startAt(0.5, 5, 0.5)
spec.endAt(4.5, 5, 4.5)
spec.rewardForReachingPosition(4.5, 5, 4.5, 100, 1)
spec.requestVideo(320, 240)
spec.observeGrid(-1, -1, -1, 1, -1, 1, "floor")
spec.observeDistance(4.5, 5, 4.5, "Gold")

# only let the agent move and turn
spec.removeAllCommandHandlers()
spec.allowContinuousMovementCommand("move")
spec.allowContinuousMovementCommand("turn")

# we can also set some parameters this way if they are lacking API
spec.mission.serverSection.initial_conditions.weather = "rain"
spec.mission.modSettings = mb.ModSettings(ms_per_tick=50)

text = spec.getAsXML(True)
print(text)
print("================\n")
# read it back, checking it against the schema
parsed = MissionSpec(text, True)
print(parsed.getAgentNames(), parsed.getVideoWidth(0), parsed.getVideoHeight(0), parsed.getVideoChannels(0))
print(parsed.getAllowedCommands(0, "ContinuousMovement"))
