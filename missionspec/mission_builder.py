import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, Dict, List, Optional, Union
import xml.etree.ElementTree as ET
from xml.etree.ElementTree import Element

from .consts import (MALMO_NAMESPACE, XMLNS_XSI, DEFAULT_AGENT_NAME, SURVIVAL,
                     ALLOW_LIST, DENY_LIST, RGB_CHANNELS, RGBD_CHANNELS,
                     TIME_LIMIT_DESCRIPTION)
from .xml_util import (sub_element, parse_number, parse_bool, get_child_optional,
                       split_namespace, remove_namespaces)


logger = logging.getLogger()


@dataclass
class About:
    summary: str = ''

    def to_xml(self, parent: Element) -> Element:
        el = sub_element(parent, 'About')
        sub_element(el, 'Summary', self.summary or None)
        return el

    def from_xml(self, aboutRoot: Optional[Element] = None) -> None:
        if aboutRoot is None:
            return
        summary = aboutRoot.find('Summary')
        if summary is not None and summary.text:
            self.summary = summary.text


@dataclass
class ModSettings:
    ms_per_tick: Optional[int] = None

    def to_xml(self, parent: Element) -> Optional[Element]:
        if self.ms_per_tick is None:
            return None
        el = sub_element(parent, 'ModSettings')
        sub_element(el, 'MsPerTick', self.ms_per_tick)
        return el

    def from_xml(self, msRoot: Optional[Element] = None) -> None:
        if msRoot is None:
            return
        msTick = msRoot.find('MsPerTick')
        if msTick is not None:
            self.ms_per_tick = int(msTick.text)


@dataclass
class ServerInitialConditions:
    time_start: Optional[int] = None
    time_pass: Optional[bool] = None
    weather: Optional[str] = None
    spawning: Optional[bool] = None
    allowedmobs: Optional[str] = None

    def is_empty(self) -> bool:
        return all(v is None for v in (self.time_start, self.time_pass, self.weather,
                                       self.spawning, self.allowedmobs))

    def to_xml(self, parent: Element) -> Optional[Element]:
        if self.is_empty():
            return None
        el = sub_element(parent, 'ServerInitialConditions')
        if self.time_start is not None or self.time_pass is not None:
            time = sub_element(el, 'Time')
            if self.time_start is not None:
                sub_element(time, 'StartTime', self.time_start)
            if self.time_pass is not None:
                sub_element(time, 'AllowPassageOfTime', self.time_pass)
        if self.weather is not None:
            # "normal", "clear", "rain", "thunder"
            sub_element(el, 'Weather', self.weather)
        if self.spawning is not None:
            sub_element(el, 'AllowSpawning', self.spawning)
        if self.allowedmobs is not None:
            sub_element(el, 'AllowedMobs', self.allowedmobs)  # e.g. "Pig Sheep"
        return el

    def _time_from_xml(self, timeRoot: Optional[Element] = None) -> None:
        if timeRoot is None:
            return
        if timeRoot.find('StartTime') is not None:
            self.time_start = int(timeRoot.find('StartTime').text)
        if timeRoot.find('AllowPassageOfTime') is not None:
            self.time_pass = parse_bool(timeRoot.find('AllowPassageOfTime').text)

    def from_xml(self, initConditionsRoot: Optional[Element] = None) -> None:
        if initConditionsRoot is None:
            return
        self._time_from_xml(initConditionsRoot.find('Time'))
        if initConditionsRoot.find('Weather') is not None:
            self.weather = initConditionsRoot.find('Weather').text
        if initConditionsRoot.find('AllowSpawning') is not None:
            self.spawning = parse_bool(initConditionsRoot.find('AllowSpawning').text)
        if initConditionsRoot.find('AllowedMobs') is not None:
            self.allowedmobs = initConditionsRoot.find('AllowedMobs').text


@dataclass
class FlatWorldGenerator:
    tag: ClassVar[str] = 'FlatWorldGenerator'
    generatorString: Optional[str] = None
    seed: Optional[str] = None
    forceReset: Optional[bool] = None

    def to_xml(self, parent: Element) -> Element:
        return sub_element(parent, self.tag, generatorString=self.generatorString,
                           seed=self.seed, forceReset=self.forceReset)

    @classmethod
    def from_xml(cls, el: Element) -> 'FlatWorldGenerator':
        force_reset = el.attrib.get('forceReset')
        return cls(generatorString=el.attrib.get('generatorString'),
                   seed=el.attrib.get('seed'),
                   forceReset=None if force_reset is None else parse_bool(force_reset))


@dataclass
class DefaultWorldGenerator:
    tag: ClassVar[str] = 'DefaultWorldGenerator'
    seed: Optional[str] = None
    forceReset: Optional[bool] = None

    def to_xml(self, parent: Element) -> Element:
        return sub_element(parent, self.tag, seed=self.seed, forceReset=self.forceReset)

    @classmethod
    def from_xml(cls, el: Element) -> 'DefaultWorldGenerator':
        force_reset = el.attrib.get('forceReset')
        return cls(seed=el.attrib.get('seed'),
                   forceReset=None if force_reset is None else parse_bool(force_reset))


WorldGenerator = Union[FlatWorldGenerator, DefaultWorldGenerator]


@dataclass
class DrawBlock:
    """
        Draw a block in world.

        Parameters:
            x (int): x coordinate.
            y (int): y coordinate.
            z (int): z coordinate.
            blockType (str): block that will be used.
    """
    x: int
    y: int
    z: int
    blockType: str

    def to_xml(self, parent: Element) -> Element:
        return sub_element(parent, 'DrawBlock', x=self.x, y=self.y, z=self.z, type=self.blockType)


@dataclass
class DrawCuboid:
    """
        Draw a cuboid in world.

        Parameters:
            x1 (int): x coordinate of the first corner.
            y1 (int): y coordinate of the first corner.
            z1 (int): z coordinate of the first corner.
            x2 (int): x coordinate of the second corner.
            y2 (int): y coordinate of the second corner.
            z2 (int): z coordinate of the second corner.
            blockType (str): block that will be used.
    """
    x1: int
    y1: int
    z1: int
    x2: int
    y2: int
    z2: int
    blockType: str

    def to_xml(self, parent: Element) -> Element:
        return sub_element(parent, 'DrawCuboid', x1=self.x1, y1=self.y1, z1=self.z1,
                           x2=self.x2, y2=self.y2, z2=self.z2, type=self.blockType)


@dataclass
class DrawLine:
    """
        Draw a line of blocks in world.

        Parameters:
            x1 (int): x coordinate of the first point.
            y1 (int): y coordinate of the first point.
            z1 (int): z coordinate of the first point.
            x2 (int): x coordinate of the second point.
            y2 (int): y coordinate of the second point.
            z2 (int): z coordinate of the second point.
            blockType (str): block that will be used.
    """
    x1: int
    y1: int
    z1: int
    x2: int
    y2: int
    z2: int
    blockType: str

    def to_xml(self, parent: Element) -> Element:
        return sub_element(parent, 'DrawLine', x1=self.x1, y1=self.y1, z1=self.z1,
                           x2=self.x2, y2=self.y2, z2=self.z2, type=self.blockType)


@dataclass
class DrawItem:
    """
        Draw an item in world.

        Parameters:
            x (int): x coordinate.
            y (int): y coordinate.
            z (int): z coordinate.
            itemType (str): item that will be used.
    """
    x: int
    y: int
    z: int
    itemType: str

    def to_xml(self, parent: Element) -> Element:
        return sub_element(parent, 'DrawItem', x=self.x, y=self.y, z=self.z, type=self.itemType)


@dataclass
class DrawSphere:
    """
        Draw a solid sphere of blocks in world.

        Parameters:
            x (int): x coordinate of the center.
            y (int): y coordinate of the center.
            z (int): z coordinate of the center.
            radius (int): radius.
            blockType (str): block that will be used.
    """
    x: int
    y: int
    z: int
    radius: int
    blockType: str

    def to_xml(self, parent: Element) -> Element:
        return sub_element(parent, 'DrawSphere', x=self.x, y=self.y, z=self.z,
                           radius=self.radius, type=self.blockType)


DrawObject = Union[DrawBlock, DrawCuboid, DrawLine, DrawItem, DrawSphere]


@dataclass
class DrawingDecorator:
    """
        Draw all given Draw objects, in order

        Parameters:
            decorators (List[Union[DrawBlock, DrawCuboid, DrawItem, DrawLine, DrawSphere]]) : a list of objects to be drawn.
            Later objects overwrite earlier ones at the same location.
    """
    decorators: List[DrawObject] = field(default_factory=list)

    def to_xml(self, parent: Element) -> Optional[Element]:
        if not self.decorators:
            return None
        el = sub_element(parent, 'DrawingDecorator')
        for elem in self.decorators:
            elem.to_xml(el)
        return el

    def from_xml(self, drawingDecoratorRoot: Optional[Element] = None) -> None:
        if drawingDecoratorRoot is None:
            return
        for el in drawingDecoratorRoot:
            a = el.attrib
            match el.tag:
                case "DrawCuboid":
                    self.addDrawCuboid(*_coords(a, 'x1', 'y1', 'z1', 'x2', 'y2', 'z2'), a["type"])
                case "DrawBlock":
                    self.addDrawBlock(*_coords(a, 'x', 'y', 'z'), a["type"])
                case "DrawLine":
                    self.addDrawLine(*_coords(a, 'x1', 'y1', 'z1', 'x2', 'y2', 'z2'), a["type"])
                case "DrawItem":
                    self.addDrawItem(*_coords(a, 'x', 'y', 'z'), a["type"])
                case "DrawSphere":
                    self.addDrawSphere(*_coords(a, 'x', 'y', 'z', 'radius'), a["type"])
                case _:
                    logger.debug('skipping unsupported drawing element %s', el.tag)

    def addDrawBlock(self, x, y, z, blockType):
        self.decorators.append(DrawBlock(x, y, z, blockType))

    def addDrawItem(self, x, y, z, itemType):
        self.decorators.append(DrawItem(x, y, z, itemType))

    def addDrawLine(self, x1, y1, z1, x2, y2, z2, blockType):
        self.decorators.append(DrawLine(x1, y1, z1, x2, y2, z2, blockType))

    def addDrawCuboid(self, x1, y1, z1, x2, y2, z2, blockType):
        self.decorators.append(DrawCuboid(x1, y1, z1, x2, y2, z2, blockType))

    def addDrawSphere(self, x, y, z, radius, blockType):
        self.decorators.append(DrawSphere(x, y, z, radius, blockType))


def _coords(attrib, *names):
    return [parse_number(attrib[n]) for n in names]


@dataclass
class ServerHandlers:
    worldgenerator: Optional[WorldGenerator] = field(default_factory=FlatWorldGenerator)
    drawingdecorator: DrawingDecorator = field(default_factory=DrawingDecorator)
    timeLimitMs: Optional[float] = None
    bQuitAnyAgent: bool = False

    def to_xml(self, parent: Element) -> Element:
        el = sub_element(parent, 'ServerHandlers')
        if self.worldgenerator is not None:
            self.worldgenerator.to_xml(el)
        self.drawingdecorator.to_xml(el)
        if self.timeLimitMs is not None:
            sub_element(el, 'ServerQuitFromTimeUp', timeLimitMs=self.timeLimitMs,
                        description=TIME_LIMIT_DESCRIPTION)
        if self.bQuitAnyAgent:
            sub_element(el, 'ServerQuitWhenAnyAgentFinishes')
        return el

    def from_xml(self, handlersRoot: Optional[Element] = None) -> None:
        self.worldgenerator = None
        if handlersRoot is None:
            return
        flat_gen = handlersRoot.find('FlatWorldGenerator')
        default_gen = handlersRoot.find('DefaultWorldGenerator')
        if flat_gen is not None:
            self.worldgenerator = FlatWorldGenerator.from_xml(flat_gen)
        elif default_gen is not None:
            self.worldgenerator = DefaultWorldGenerator.from_xml(default_gen)

        self.drawingdecorator.from_xml(handlersRoot.find('DrawingDecorator'))

        time_up = handlersRoot.find('ServerQuitFromTimeUp')
        if time_up is not None:
            self.timeLimitMs = parse_number(time_up.attrib['timeLimitMs'])
        self.bQuitAnyAgent = handlersRoot.find('ServerQuitWhenAnyAgentFinishes') is not None


@dataclass
class ServerSection:
    handlers: ServerHandlers = field(default_factory=ServerHandlers)
    initial_conditions: ServerInitialConditions = field(default_factory=ServerInitialConditions)

    def to_xml(self, parent: Element) -> Element:
        el = sub_element(parent, 'ServerSection')
        self.initial_conditions.to_xml(el)
        self.handlers.to_xml(el)
        return el

    def from_xml(self, serverSectionRoot: Optional[Element] = None) -> None:
        if serverSectionRoot is None:
            self.handlers.from_xml(None)
            return
        self.initial_conditions.from_xml(serverSectionRoot.find('ServerInitialConditions'))
        self.handlers.from_xml(serverSectionRoot.find('ServerHandlers'))


class CommandCategory(str, Enum):
    CONTINUOUS_MOVEMENT = 'ContinuousMovement'
    DISCRETE_MOVEMENT = 'DiscreteMovement'
    ABSOLUTE_MOVEMENT = 'AbsoluteMovement'
    INVENTORY = 'Inventory'
    CHAT = 'Chat'

    @property
    def tag(self) -> str:
        return self.value + 'Commands'

    @classmethod
    def from_tag(cls, tag: str) -> Optional['CommandCategory']:
        for category in cls:
            if category.tag == tag:
                return category
        return None


@dataclass
class AllowList:
    list_type: ClassVar[str] = ALLOW_LIST
    verbs: List[str] = field(default_factory=list)


@dataclass
class DenyList:
    list_type: ClassVar[str] = DENY_LIST
    verbs: List[str] = field(default_factory=list)


# None means the handler is present without restriction
Modifier = Optional[Union[AllowList, DenyList]]


@dataclass
class CommandHandler:
    """A command handler for one category of commands.

    The modifier is either None (every verb of the category is allowed),
    an AllowList (only the listed verbs) or a DenyList (all but the listed
    verbs). Holding both lists at once is not representable.
    """
    category: CommandCategory
    modifier: Modifier = None

    def allowAll(self) -> None:
        self.modifier = None

    def allow(self, verb: str) -> None:
        if not isinstance(self.modifier, AllowList):
            self.modifier = AllowList()
        if verb not in self.modifier.verbs:
            self.modifier.verbs.append(verb)

    def allowedCommands(self) -> List[str]:
        if isinstance(self.modifier, AllowList):
            return list(self.modifier.verbs)
        return []

    def to_xml(self, parent: Element) -> Element:
        el = sub_element(parent, self.category.tag)
        if self.modifier is not None:
            ml = sub_element(el, 'ModifierList', type=self.modifier.list_type)
            for verb in self.modifier.verbs:
                sub_element(ml, 'command', verb)
        return el

    @classmethod
    def from_xml(cls, category: CommandCategory, el: Element) -> 'CommandHandler':
        handler = cls(category)
        ml = el.find('ModifierList')
        if ml is None:
            return handler
        verbs = [c.text or '' for c in ml.findall('command')]
        if ml.attrib.get('type', ALLOW_LIST) == DENY_LIST:
            handler.modifier = DenyList(verbs)
        else:
            handler.modifier = AllowList(verbs)
        return handler


@dataclass
class Commands:
    handlers: Dict[CommandCategory, CommandHandler] = field(default_factory=dict)

    def removeAll(self) -> None:
        self.handlers.clear()

    def getOrCreate(self, category: CommandCategory) -> CommandHandler:
        if category not in self.handlers:
            self.handlers[category] = CommandHandler(category)
        return self.handlers[category]

    def allowAll(self, category: CommandCategory) -> None:
        self.getOrCreate(category).allowAll()

    def allow(self, category: CommandCategory, verb: str) -> None:
        self.getOrCreate(category).allow(verb)

    def categories(self) -> List[CommandCategory]:
        return list(self.handlers)

    def to_xml(self, parent: Element) -> None:
        for handler in self.handlers.values():
            handler.to_xml(parent)


@dataclass
class SimpleObservation:
    """Observation request without parameters, e.g. ObservationFromHotBar."""
    tag: str

    def to_xml(self, parent: Element) -> Element:
        return sub_element(parent, self.tag)


SIMPLE_OBSERVATIONS = ('ObservationFromRecentCommands', 'ObservationFromHotBar',
                       'ObservationFromFullInventory', 'ObservationFromChat',
                       'ObservationFromFullStats', 'ObservationFromRay')


@dataclass
class ObservationFromGrid:
    x1: int
    y1: int
    z1: int
    x2: int
    y2: int
    z2: int
    name: str

    def to_xml(self, parent: Element) -> Element:
        el = sub_element(parent, 'ObservationFromGrid')
        grid = sub_element(el, 'Grid', name=self.name)
        sub_element(grid, 'min', x=self.x1, y=self.y1, z=self.z1)
        sub_element(grid, 'max', x=self.x2, y=self.y2, z=self.z2)
        return el

    @classmethod
    def from_xml(cls, el: Element) -> List['ObservationFromGrid']:
        result = []
        for grid in el.findall('Grid'):
            lo = grid.find('min').attrib
            hi = grid.find('max').attrib
            result.append(cls(*_coords(lo, 'x', 'y', 'z'), *_coords(hi, 'x', 'y', 'z'),
                              grid.attrib['name']))
        return result


@dataclass
class ObservationFromDistance:
    x: float
    y: float
    z: float
    name: str

    def to_xml(self, parent: Element) -> Element:
        el = sub_element(parent, 'ObservationFromDistance')
        sub_element(el, 'Marker', name=self.name, x=self.x, y=self.y, z=self.z)
        return el

    @classmethod
    def from_xml(cls, el: Element) -> List['ObservationFromDistance']:
        return [cls(*_coords(m.attrib, 'x', 'y', 'z'), m.attrib['name'])
                for m in el.findall('Marker')]


ObservationRequest = Union[SimpleObservation, ObservationFromGrid, ObservationFromDistance]


@dataclass
class VideoProducer:
    width: int = 0
    height: int = 0
    want_depth: bool = False

    @property
    def channels(self) -> int:
        return RGBD_CHANNELS if self.want_depth else RGB_CHANNELS

    def to_xml(self, parent: Element) -> Element:
        el = sub_element(parent, 'VideoProducer', want_depth=self.want_depth)
        sub_element(el, 'Width', self.width)
        sub_element(el, 'Height', self.height)
        return el

    @classmethod
    def from_xml(cls, el: Element) -> 'VideoProducer':
        return cls(width=int(el.find('Width').text), height=int(el.find('Height').text),
                   want_depth=parse_bool(el.attrib.get('want_depth')))


@dataclass
class ColourMapProducer:
    width: int = 0
    height: int = 0

    def to_xml(self, parent: Element) -> Element:
        el = sub_element(parent, 'ColourMapProducer')
        sub_element(el, 'Width', self.width)
        sub_element(el, 'Height', self.height)
        return el

    @classmethod
    def from_xml(cls, el: Element) -> 'ColourMapProducer':
        return cls(width=int(el.find('Width').text), height=int(el.find('Height').text))


@dataclass
class PositionReward:
    x: float
    y: float
    z: float
    amount: float
    tolerance: float


@dataclass
class EndPosition:
    x: float
    y: float
    z: float
    tolerance: Optional[float] = None


@dataclass
class AgentHandlers:
    observations: List[ObservationRequest] = field(default_factory=list)
    video_producer: Optional[VideoProducer] = None
    colourmap_producer: Optional[ColourMapProducer] = None
    rewards: List[PositionReward] = field(default_factory=list)
    commands: Commands = field(default_factory=Commands)
    quit_positions: List[EndPosition] = field(default_factory=list)

    def to_xml(self, parent: Element) -> Element:
        el = sub_element(parent, 'AgentHandlers')
        for obs in self.observations:
            obs.to_xml(el)
        if self.video_producer is not None:
            self.video_producer.to_xml(el)
        if self.colourmap_producer is not None:
            self.colourmap_producer.to_xml(el)
        if self.rewards:
            rewards = sub_element(el, 'RewardForReachingPosition')
            for r in self.rewards:
                sub_element(rewards, 'Marker', x=r.x, y=r.y, z=r.z, reward=r.amount,
                            tolerance=r.tolerance)
        self.commands.to_xml(el)
        if self.quit_positions:
            quits = sub_element(el, 'AgentQuitFromReachingPosition')
            for p in self.quit_positions:
                sub_element(quits, 'Marker', x=p.x, y=p.y, z=p.z, tolerance=p.tolerance)
        return el

    def from_xml(self, agentHandlersRoot: Optional[Element] = None) -> None:
        if agentHandlersRoot is None:
            return
        for child in agentHandlersRoot:
            category = CommandCategory.from_tag(child.tag)
            if category is not None:
                self.commands.handlers[category] = CommandHandler.from_xml(category, child)
                continue
            match child.tag:
                case tag if tag in SIMPLE_OBSERVATIONS:
                    self.observations.append(SimpleObservation(tag))
                case 'ObservationFromGrid':
                    self.observations.extend(ObservationFromGrid.from_xml(child))
                case 'ObservationFromDistance':
                    self.observations.extend(ObservationFromDistance.from_xml(child))
                case 'VideoProducer':
                    self.video_producer = VideoProducer.from_xml(child)
                case 'ColourMapProducer':
                    self.colourmap_producer = ColourMapProducer.from_xml(child)
                case 'RewardForReachingPosition':
                    for m in child.findall('Marker'):
                        self.rewards.append(PositionReward(*_coords(m.attrib, 'x', 'y', 'z', 'reward', 'tolerance')))
                case 'AgentQuitFromReachingPosition':
                    for m in child.findall('Marker'):
                        tolerance = m.attrib.get('tolerance')
                        self.quit_positions.append(EndPosition(
                            *_coords(m.attrib, 'x', 'y', 'z'),
                            tolerance=None if tolerance is None else parse_number(tolerance)))
                case _:
                    logger.debug('skipping unsupported agent handler %s', child.tag)

    def hasVideo(self) -> bool:
        return self.video_producer is not None

    def hasSegmentation(self) -> bool:
        return self.colourmap_producer is not None


@dataclass
class Placement:
    x: float
    y: float
    z: float
    yaw: Optional[float] = None
    pitch: Optional[float] = None


@dataclass
class AgentStart:
    placement: Optional[Placement] = None

    def to_xml(self, parent: Element) -> Element:
        el = sub_element(parent, 'AgentStart')
        if self.placement is not None:
            p = self.placement
            sub_element(el, 'Placement', x=p.x, y=p.y, z=p.z, yaw=p.yaw, pitch=p.pitch)
        return el

    def from_xml(self, agentRoot: Element) -> None:
        placement = get_child_optional(agentRoot, 'AgentSection.AgentStart.Placement')
        if placement is None:
            return
        a = placement.attrib
        self.placement = Placement(*_coords(a, 'x', 'y', 'z'),
                                   yaw=parse_number(a['yaw']) if 'yaw' in a else None,
                                   pitch=parse_number(a['pitch']) if 'pitch' in a else None)


@dataclass
class AgentSection:
    name: str = DEFAULT_AGENT_NAME
    mode: str = SURVIVAL
    agentstart: AgentStart = field(default_factory=AgentStart)
    agenthandlers: AgentHandlers = field(default_factory=AgentHandlers)

    def to_xml(self, parent: Element) -> Element:
        el = sub_element(parent, 'AgentSection', mode=self.mode)
        sub_element(el, 'Name', self.name)
        self.agentstart.to_xml(el)
        self.agenthandlers.to_xml(el)
        return el

    def from_xml(self, agentRoot: Element) -> None:
        self.mode = agentRoot.attrib.get('mode', SURVIVAL)
        name = agentRoot.find('Name')
        if name is not None and name.text:
            self.name = name.text
        self.agentstart.from_xml(agentRoot)
        self.agenthandlers.from_xml(agentRoot.find('AgentHandlers'))

    def hasVideo(self) -> bool:
        return self.agenthandlers.hasVideo()

    def hasSegmentation(self) -> bool:
        return self.agenthandlers.hasSegmentation()


@dataclass
class MissionXML:
    about: About = field(default_factory=About)
    modSettings: ModSettings = field(default_factory=ModSettings)
    serverSection: ServerSection = field(default_factory=ServerSection)
    agentSections: List[AgentSection] = field(default_factory=lambda: [AgentSection()])
    namespace: str = MALMO_NAMESPACE

    def getAgentNames(self) -> List[str]:
        return [ag.name for ag in self.agentSections]

    def to_xml(self) -> Element:
        el = ET.Element('Mission')
        el.attrib['xmlns'] = self.namespace
        el.attrib['xmlns:xsi'] = XMLNS_XSI
        self.about.to_xml(el)
        self.modSettings.to_xml(el)
        self.serverSection.to_xml(el)
        for agentSection in self.agentSections:
            agentSection.to_xml(el)
        return el

    @classmethod
    def from_xml(cls, missionRoot: Element) -> 'MissionXML':
        """Build a mission from a parsed <Mission> element.

        Elements the builder does not model are skipped.
        """
        ns, _ = split_namespace(missionRoot.tag)
        remove_namespaces(missionRoot)
        mission = cls(agentSections=[], namespace=ns or MALMO_NAMESPACE)
        mission.about.from_xml(missionRoot.find('About'))
        mission.modSettings.from_xml(missionRoot.find('ModSettings'))
        mission.serverSection.from_xml(missionRoot.find('ServerSection'))
        for agent in missionRoot.findall('AgentSection'):
            section = AgentSection()
            section.from_xml(agent)
            mission.agentSections.append(section)
        return mission
