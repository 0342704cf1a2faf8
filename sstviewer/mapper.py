"""
Service Payload to State Mapper

Converts graph service JSON into read-only state snapshots.

MAPPING BOUNDARY:
=================
This is the ONLY place where wire payloads become state objects.
All conversion happens here, nowhere else.

MAPPING RULES:
==============
1. Absent collections become empty, never an error
2. Null list entries are skipped
3. Preserve service ordering
4. Category indices outside the fixed table are malformed data
"""

from __future__ import annotations
from typing import Any, Callable, Dict, List, Optional, Tuple
import logging

from pydantic import ValidationError

from .errors import InvariantViolation, MalformedResponse
from .schemas import (
    WireBrowse, WireBrowseEntry, WireCone, WireConePayload, WireNeighborhood,
    WireNodeEvent, WireNodePtr, WirePage, WirePaths, WireSequence, WireStory,
    WireTOC, WireWebPath,
)
from .state import (
    BROKEN_ARROW, ST_TOP,
    BrowseEntry, BrowseResponse, ConeResponse, ConeResult, NeighborhoodResponse,
    NodeEvent, NodeRef, Orbit, PageResponse, PageView, Path, PathElement,
    QueryMode, QueryRequest, Relation, RelationCategory, Response,
    SequenceResponse, Story, TOCEntry, TOCResponse,
)

logger = logging.getLogger(__name__)


class ResponseMapper:
    """
    Maps graph service payloads to state snapshots.

    SINGLE POINT OF CONVERSION:
    ===========================
    All wire -> state conversion goes through this class.
    """

    def map_response(self, request: QueryRequest, payload: Any) -> Response:
        """
        Map a decoded JSON payload for the request's mode.

        Raises MalformedResponse if the payload does not fit the mode's shape.
        """
        handler = self._handlers()[request.mode]
        try:
            return handler(request, payload if payload is not None else {})
        except ValidationError as e:
            logger.error("Payload for %s failed validation: %s", request.mode.value, e)
            raise MalformedResponse(
                f"Malformed {request.mode.value} payload: {e.error_count()} error(s)"
            ) from e
        except InvariantViolation as e:
            logger.error("Payload for %s violates invariant: %s", request.mode.value, e)
            raise MalformedResponse(str(e)) from e

    def _handlers(self) -> Dict[QueryMode, Callable[[QueryRequest, Any], Response]]:
        return {
            QueryMode.NEIGHBORHOOD: self.map_neighborhood,
            QueryMode.CONE: self.map_cone,
            QueryMode.SEQUENCE: self.map_sequence,
            QueryMode.BROWSE: self.map_browse,
            QueryMode.TOC: self.map_toc,
            QueryMode.PAGE: self.map_page,
        }

    # =========================================================================
    # RESPONSE MAPPING
    # =========================================================================

    def map_neighborhood(self, request: QueryRequest, payload: Any) -> NeighborhoodResponse:
        wire = WireNeighborhood.model_validate(payload)
        return NeighborhoodResponse(
            request=request,
            events=tuple(self.map_event(e) for e in wire.events or () if e is not None),
        )

    def map_cone(self, request: QueryRequest, payload: Any) -> ConeResponse:
        wire = WireConePayload.model_validate(payload)
        return ConeResponse(
            request=request,
            paths=tuple(self._map_cone_result(c) for c in wire.paths or () if c is not None),
        )

    def map_sequence(self, request: QueryRequest, payload: Any) -> SequenceResponse:
        wire = WireSequence.model_validate(payload)
        return SequenceResponse(
            request=request,
            stories=tuple(self._map_story(s) for s in wire.events or () if s is not None),
        )

    def map_browse(self, request: QueryRequest, payload: Any) -> BrowseResponse:
        wire = WireBrowse.model_validate(payload)
        return BrowseResponse(
            request=request,
            nptrs=tuple(self._map_browse_entry(b) for b in wire.nptrs or () if b is not None),
        )

    def map_toc(self, request: QueryRequest, payload: Any) -> TOCResponse:
        wire = WireTOC.model_validate(payload)
        return TOCResponse(
            request=request,
            entries=tuple(
                TOCEntry(chapter=t.chapter or "", contexts=tuple(t.contexts or ()))
                for t in wire.toc or () if t is not None
            ),
        )

    def map_page(self, request: QueryRequest, payload: Any) -> PageResponse:
        wire = WirePage.model_validate(payload)
        return PageResponse(
            request=request,
            page=PageView(
                title=wire.title or "",
                context=wire.context or "",
                notes=self.map_paths(wire.notes),
            ),
        )

    # =========================================================================
    # ENTITY MAPPING
    # =========================================================================

    def map_event(self, wire: WireNodeEvent) -> NodeEvent:
        """Map one node event, including its orbit."""
        return NodeEvent(
            text=wire.text or "",
            chapter=wire.chap or "",
            identity=self._map_ref(wire.nptr, wire.nclass, wire.ncptr),
            orbit=self._map_orbit(wire),
            title=wire.title,
        )

    def map_paths(self, wire: WirePaths) -> Tuple[Path, ...]:
        """Map a list of paths; null paths are dropped."""
        return tuple(self._map_path(p) for p in wire or () if p is not None)

    def _map_orbit(self, wire: WireNodeEvent) -> Orbit:
        slots = wire.orbits or []
        if len(slots) > ST_TOP:
            raise InvariantViolation(
                f"Orbit has {len(slots)} category slots, expected at most {ST_TOP}"
            )
        mapped: List[Tuple[Relation, ...]] = []
        for slot in slots:
            mapped.append(tuple(
                Relation(
                    label=o.arrow if o.arrow is not None else BROKEN_ARROW,
                    category=RelationCategory.from_index(o.stindex),
                    distance=o.radius,
                    context=o.ctx or "",
                    target=self._map_ref(o.dst),
                    text=o.text or "",
                )
                for o in slot or ()
            ))
        mapped.extend([()] * (ST_TOP - len(mapped)))
        return Orbit(slots=tuple(mapped))

    def _map_path(self, wire: List[WireWebPath]) -> Path:
        elements = []
        for position, element in enumerate(wire):
            if position % 2 == 0:
                elements.append(PathElement(
                    name=element.name or "",
                    identity=self._map_ref(element.nptr, element.nclass, element.ncptr),
                ))
            else:
                elements.append(PathElement(
                    name=element.name if element.name is not None else BROKEN_ARROW,
                    arrow=element.arr,
                    category=RelationCategory.from_index(element.stindex),
                ))
        return tuple(elements)

    def _map_cone_result(self, wire: WireCone) -> ConeResult:
        return ConeResult(
            title=wire.title or "",
            identity=self._map_ref(wire.nptr, wire.nclass, wire.ncptr),
            entire_path=self.map_paths(wire.entire),
            betweenness_ranking=tuple(wire.btwc or ()),
            supernodes=tuple(wire.supernodes or ()),
        )

    def _map_browse_entry(self, wire: WireBrowseEntry) -> BrowseEntry:
        per_category = tuple(
            (category, self.map_paths(getattr(wire, category.wire_key.lower())))
            for category in RelationCategory
        )
        return BrowseEntry(
            title=wire.title or "",
            identity=self._map_ref(wire.nptr, wire.nclass, wire.ncptr),
            paths_per_category=per_category,
        )

    def _map_story(self, wire: WireStory) -> Story:
        return Story(
            text=wire.text or "",
            arrow_context=wire.arrow or "",
            container=self._map_ref(wire.contain_nptr) if wire.contain_nptr is not None else None,
            axis=tuple(self.map_event(e) for e in wire.axis or () if e is not None),
        )

    # =========================================================================
    # HELPERS
    # =========================================================================

    def _map_ref(
        self,
        nptr: Optional[WireNodePtr],
        nclass: Optional[int] = None,
        ncptr: Optional[int] = None,
    ) -> NodeRef:
        """NPtr wins over the flat NClass/NCPtr pair."""
        if nptr is not None:
            return NodeRef(node_class=nptr.node_class, pointer=nptr.pointer)
        return NodeRef(node_class=nclass or 0, pointer=ncptr or 0)
