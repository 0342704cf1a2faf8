"""
Wire Schemas

Pydantic models of the graph service JSON, field names as sent on the wire.

TOLERANCE:
==========
The service marshals empty lists as null and omits optional identity
fields. Every collection is Optional; the mapper turns None into empty.
"""

from __future__ import annotations
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class WireNodePtr(WireModel):
    node_class: int = Field(0, alias="Class")
    pointer: int = Field(0, alias="CPtr")


class WireOrbit(WireModel):
    radius: int = Field(0, alias="Radius")
    arrow: Optional[str] = Field(None, alias="Arrow")
    stindex: int = Field(0, alias="STindex")
    dst: Optional[WireNodePtr] = Field(None, alias="Dst")
    ctx: Optional[str] = Field(None, alias="Ctx")
    text: Optional[str] = Field(None, alias="Text")


class WireNodeEvent(WireModel):
    text: Optional[str] = Field(None, alias="Text")
    length: int = Field(0, alias="L")
    chap: Optional[str] = Field(None, alias="Chap")
    title: Optional[str] = Field(None, alias="Title")
    nptr: Optional[WireNodePtr] = Field(None, alias="NPtr")
    nclass: Optional[int] = Field(None, alias="NClass")
    ncptr: Optional[int] = Field(None, alias="NCPtr")
    orbits: Optional[List[Optional[List[WireOrbit]]]] = Field(None, alias="Orbits")


class WireWebPath(WireModel):
    nptr: Optional[WireNodePtr] = Field(None, alias="NPtr")
    nclass: Optional[int] = Field(None, alias="NClass")
    ncptr: Optional[int] = Field(None, alias="NCPtr")
    arr: int = Field(0, alias="Arr")
    stindex: int = Field(0, alias="STindex")
    name: Optional[str] = Field(None, alias="Name")


WirePaths = Optional[List[Optional[List[WireWebPath]]]]


class WireCone(WireModel):
    nclass: int = Field(0, alias="NClass")
    ncptr: int = Field(0, alias="NCPtr")
    nptr: Optional[WireNodePtr] = Field(None, alias="NPtr")
    title: Optional[str] = Field(None, alias="Title")
    entire: WirePaths = Field(None, alias="Entire")
    btwc: Optional[List[str]] = Field(None, alias="BTWC")
    supernodes: Optional[List[str]] = Field(None, alias="Supernodes")


class WireBrowseEntry(WireModel):
    nclass: int = Field(0, alias="NClass")
    ncptr: int = Field(0, alias="NCPtr")
    nptr: Optional[WireNodePtr] = Field(None, alias="NPtr")
    title: Optional[str] = Field(None, alias="Title")
    im3: WirePaths = Field(None, alias="Im3")
    im2: WirePaths = Field(None, alias="Im2")
    im1: WirePaths = Field(None, alias="Im1")
    in0: WirePaths = Field(None, alias="In0")
    il1: WirePaths = Field(None, alias="Il1")
    ic2: WirePaths = Field(None, alias="Ic2")
    ie3: WirePaths = Field(None, alias="Ie3")


class WireStory(WireModel):
    contain_nptr: Optional[WireNodePtr] = Field(None, alias="ContainNPtr")
    text: Optional[str] = Field(None, alias="Text")
    arrow: Optional[str] = Field(None, alias="Arrow")
    axis: Optional[List[Optional[WireNodeEvent]]] = Field(None, alias="Axis")


class WireTOCEntry(WireModel):
    chapter: Optional[str] = Field(None, alias="Chapter")
    contexts: Optional[List[str]] = Field(None, alias="Contexts")


# =============================================================================
# TOP-LEVEL PAYLOADS
# =============================================================================

class WireNeighborhood(WireModel):
    events: Optional[List[Optional[WireNodeEvent]]] = None


class WireConePayload(WireModel):
    paths: Optional[List[Optional[WireCone]]] = None


class WireSequence(WireModel):
    events: Optional[List[Optional[WireStory]]] = None


class WireBrowse(WireModel):
    nptrs: Optional[List[Optional[WireBrowseEntry]]] = None


class WireTOC(WireModel):
    toc: Optional[List[Optional[WireTOCEntry]]] = Field(None, alias="TOC")


class WirePage(WireModel):
    title: Optional[str] = Field(None, alias="Title")
    context: Optional[str] = Field(None, alias="Context")
    notes: WirePaths = Field(None, alias="Notes")
