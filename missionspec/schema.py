"""Pydantic models of the mission XML grammar accepted by MissionSpec.

The XML is converted with xml_to_dict: attributes and child elements become
keys, repeated children become lists and element text is stored under 'text'.
"""
import logging
from typing import Annotated, Any, List, Literal, Optional, TypeVar
import xml.etree.ElementTree as ET

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, ValidationError, model_validator

from .consts import ALLOW_LIST, DENY_LIST
from .mission_exception import SchemaViolation
from .xml_util import remove_namespaces, xml_to_dict


logger = logging.getLogger()

T = TypeVar('T')


def _as_list(value: Any) -> Any:
    if value is None:
        return []
    if isinstance(value, list):
        return value
    return [value]


Many = Annotated[List[T], BeforeValidator(_as_list)]
AgentMode = Literal['Survival', 'Creative', 'Spectator']


class _Element(BaseModel):
    model_config = ConfigDict(extra='forbid')


class _Empty(_Element):
    pass


class _Text(_Element):
    text: str = ''


class _IntText(_Element):
    text: int


class _BoolText(_Element):
    text: bool


class _WeatherText(_Element):
    text: Literal['normal', 'clear', 'rain', 'thunder']


class AboutModel(_Element):
    Summary: _Text = Field(default_factory=_Text)


class ModSettingsModel(_Element):
    MsPerTick: Optional[_IntText] = None


class TimeModel(_Element):
    StartTime: Optional[_IntText] = None
    AllowPassageOfTime: Optional[_BoolText] = None


class ServerInitialConditionsModel(_Element):
    Time: Optional[TimeModel] = None
    Weather: Optional[_WeatherText] = None
    AllowSpawning: Optional[_BoolText] = None
    AllowedMobs: Optional[_Text] = None


class FlatWorldGeneratorModel(_Element):
    generatorString: Optional[str] = None
    seed: Optional[str] = None
    forceReset: Optional[bool] = None


class DefaultWorldGeneratorModel(_Element):
    seed: Optional[str] = None
    forceReset: Optional[bool] = None


class _Point(_Element):
    x: int
    y: int
    z: int


class _Span(_Element):
    x1: int
    y1: int
    z1: int
    x2: int
    y2: int
    z2: int


class DrawBlockModel(_Point):
    type: str


class DrawItemModel(_Point):
    type: str


class DrawSphereModel(_Point):
    radius: int
    type: str


class DrawCuboidModel(_Span):
    type: str


class DrawLineModel(_Span):
    type: str


class DrawingDecoratorModel(_Element):
    DrawBlock: Many[DrawBlockModel] = Field(default_factory=list)
    DrawItem: Many[DrawItemModel] = Field(default_factory=list)
    DrawSphere: Many[DrawSphereModel] = Field(default_factory=list)
    DrawCuboid: Many[DrawCuboidModel] = Field(default_factory=list)
    DrawLine: Many[DrawLineModel] = Field(default_factory=list)


class ServerQuitFromTimeUpModel(_Element):
    timeLimitMs: float
    description: Optional[str] = None


class ServerHandlersModel(_Element):
    FlatWorldGenerator: Optional[FlatWorldGeneratorModel] = None
    DefaultWorldGenerator: Optional[DefaultWorldGeneratorModel] = None
    DrawingDecorator: Optional[DrawingDecoratorModel] = None
    ServerQuitFromTimeUp: Optional[ServerQuitFromTimeUpModel] = None
    ServerQuitWhenAnyAgentFinishes: Optional[_Empty] = None

    @model_validator(mode='after')
    def _one_world_generator(self):
        if (self.FlatWorldGenerator is None) == (self.DefaultWorldGenerator is None):
            raise ValueError('exactly one world generator is required')
        return self


class ServerSectionModel(_Element):
    ServerInitialConditions: Optional[ServerInitialConditionsModel] = None
    ServerHandlers: ServerHandlersModel


class PlacementModel(_Element):
    x: float
    y: float
    z: float
    yaw: Optional[float] = None
    pitch: Optional[float] = None


class AgentStartModel(_Element):
    Placement: Optional[PlacementModel] = None


class ModifierListModel(_Element):
    type: Literal[ALLOW_LIST, DENY_LIST]
    command: Many[_Text] = Field(default_factory=list)


class CommandHandlerModel(_Element):
    ModifierList: Optional[ModifierListModel] = None


class GridModel(_Element):
    name: str
    min: _Point
    max: _Point


class ObservationFromGridModel(_Element):
    Grid: Many[GridModel] = Field(min_length=1)


class DistanceMarkerModel(_Element):
    name: str
    x: float
    y: float
    z: float


class ObservationFromDistanceModel(_Element):
    Marker: Many[DistanceMarkerModel] = Field(min_length=1)


class VideoProducerModel(_Element):
    want_depth: Optional[bool] = None
    Width: _IntText
    Height: _IntText


class ColourMapProducerModel(_Element):
    Width: _IntText
    Height: _IntText


class RewardMarkerModel(_Element):
    x: float
    y: float
    z: float
    reward: float
    tolerance: float


class RewardForReachingPositionModel(_Element):
    Marker: Many[RewardMarkerModel] = Field(min_length=1)


class QuitMarkerModel(_Element):
    x: float
    y: float
    z: float
    tolerance: Optional[float] = None


class AgentQuitFromReachingPositionModel(_Element):
    Marker: Many[QuitMarkerModel] = Field(min_length=1)


class AgentHandlersModel(_Element):
    ObservationFromRecentCommands: Many[_Empty] = Field(default_factory=list)
    ObservationFromHotBar: Many[_Empty] = Field(default_factory=list)
    ObservationFromFullInventory: Many[_Empty] = Field(default_factory=list)
    ObservationFromChat: Many[_Empty] = Field(default_factory=list)
    ObservationFromFullStats: Many[_Empty] = Field(default_factory=list)
    ObservationFromRay: Many[_Empty] = Field(default_factory=list)
    ObservationFromGrid: Many[ObservationFromGridModel] = Field(default_factory=list)
    ObservationFromDistance: Many[ObservationFromDistanceModel] = Field(default_factory=list)
    VideoProducer: Optional[VideoProducerModel] = None
    ColourMapProducer: Optional[ColourMapProducerModel] = None
    RewardForReachingPosition: Optional[RewardForReachingPositionModel] = None
    ContinuousMovementCommands: Optional[CommandHandlerModel] = None
    DiscreteMovementCommands: Optional[CommandHandlerModel] = None
    AbsoluteMovementCommands: Optional[CommandHandlerModel] = None
    InventoryCommands: Optional[CommandHandlerModel] = None
    ChatCommands: Optional[CommandHandlerModel] = None
    AgentQuitFromReachingPosition: Optional[AgentQuitFromReachingPositionModel] = None


class AgentSectionModel(_Element):
    mode: AgentMode = 'Survival'
    Name: _Text
    AgentStart: AgentStartModel
    AgentHandlers: AgentHandlersModel


class MissionModel(_Element):
    About: AboutModel
    ModSettings: Optional[ModSettingsModel] = None
    ServerSection: ServerSectionModel
    AgentSection: Many[AgentSectionModel] = Field(min_length=1)


def validate(xml: str) -> MissionModel:
    """Check mission XML against the mission grammar.

    returns the validated MissionModel
    raises SchemaViolation with the validator's error list in .details
    """
    try:
        root = ET.fromstring(xml)
    except ET.ParseError as e:
        logger.error('mission XML is not well formed: %s', e)
        raise SchemaViolation('mission XML is not well formed: ' + str(e), [str(e)]) from e
    remove_namespaces(root)
    if root.tag != 'Mission':
        message = 'expected <Mission> root element, got <' + root.tag + '>'
        logger.error(message)
        raise SchemaViolation(message, [message])
    try:
        return MissionModel.model_validate(xml_to_dict(root))
    except ValidationError as e:
        logger.error('mission XML does not conform to the schema: %s', e)
        raise SchemaViolation('mission XML does not conform to the schema: {0} error(s)'.format(e.error_count()),
                              e.errors(include_url=False)) from e
