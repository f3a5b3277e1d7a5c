"""
Reference stubs for entities linked from a page.

A stub carries only the numeric id and the display name taken from the anchor.
Hydrating the full entity is the job of its owner, not of the parser.
"""
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class EntityKind(Enum):

    GAME = 'g'
    TEAM = 't'
    PLAYER = 'u'


class TeamStub(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal['team'] = 'team'
    id: int
    name: str


class PlayerStub(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal['player'] = 'player'
    id: int
    name: str


ReferenceStub = Annotated[Union[TeamStub, PlayerStub], Field(discriminator='kind')]
