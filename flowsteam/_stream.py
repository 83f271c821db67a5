# -*- coding: utf-8 -*-
# FlowSTEAM: Mass-Flow Simulation of Streams and Equipment Modules
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
from __future__ import annotations
from typing import Optional, TYPE_CHECKING
from numbers import Integral
from ._preferences import preferences
if TYPE_CHECKING:
    from .utils import Tickets
    from ._unit import Unit

__all__ = ('Stream',)

class Stream:
    """
    Create a Stream object that carries a total mass flow rate. The same
    Stream object may be shared by the unit operation that produces it (as
    an outlet) and the unit operation that consumes it (as an inlet).

    Parameters
    ----------
    ID :
        A name seed or a name. If an integer is given, the ID will be the
        ticket name followed by the number (e.g. 1 -> 's1'). If a string is
        given, it is used as is. If None, an ID is taken from `tickets`.
    F_mass :
        Mass flow rate. Defaults to 0.
    tickets :
        Generator of IDs, used only when `ID` is None.

    Examples
    --------
    Create a stream from a name seed and set its mass flow rate:

    >>> from flowsteam import Stream
    >>> s1 = Stream(1)
    >>> s1.F_mass = 10.
    >>> s1.show()
    Stream: s1
     flow (kg/hr): 10

    Stream names may also be drawn from an explicit ticket generator:

    >>> from flowsteam import Tickets
    >>> tickets = Tickets()
    >>> Stream(tickets=tickets), Stream(tickets=tickets)
    (<Stream: s1>, <Stream: s2>)

    """
    __slots__ = ('_ID', '_F_mass', '_source', '_sink')

    #: Starting letter of IDs created from a name seed.
    ticket_name: str = 's'

    line = 'Stream'

    def __init__(self,
            ID: Optional[str|int]=None,
            F_mass: float=0.,
            *,
            tickets: Optional[Tickets]=None,
        ):
        if ID is None:
            if tickets is None:
                raise ValueError('either an ID, a name seed, or tickets must be given')
            ID = tickets.take()
        elif isinstance(ID, Integral) and not isinstance(ID, bool):
            ID = self.ticket_name + str(int(ID))
        elif not isinstance(ID, str):
            raise TypeError(f"ID must be a string or an integer, not {type(ID).__name__!r}")
        self._ID = ID
        self.F_mass = F_mass

        #: Unit operation where stream is an outlet.
        self._source = None

        #: Unit operation where stream is an inlet.
        self._sink = None

    @property
    def ID(self) -> str:
        """Name of the stream."""
        return self._ID
    @ID.setter
    def ID(self, ID):
        if not isinstance(ID, str):
            raise TypeError(f"ID must be a string, not {type(ID).__name__!r}")
        self._ID = ID

    @property
    def F_mass(self) -> float:
        """Total mass flow rate. No validation is done on the sign; negative
        flows are only reported by unit operations at run time."""
        return self._F_mass
    @F_mass.setter
    def F_mass(self, F_mass):
        self._F_mass = float(F_mass)

    @property
    def source(self) -> Unit|None:
        """Unit operation where stream is an outlet."""
        return self._source

    @property
    def sink(self) -> Unit|None:
        """Unit operation where stream is an inlet."""
        return self._sink

    def isfeed(self):
        """Return whether stream has no source."""
        return self._source is None

    def isproduct(self):
        """Return whether stream has no sink."""
        return self._sink is None

    def empty(self):
        """Set mass flow rate to zero."""
        self._F_mass = 0.

    def isempty(self):
        """Return whether mass flow rate is zero."""
        return self._F_mass == 0.

    def copy_flow(self, other: Stream):
        """Copy mass flow rate from another stream."""
        self._F_mass = other._F_mass

    def copy(self, ID: Optional[str|int]=None, *, tickets: Optional[Tickets]=None):
        """
        Return a copy of the stream that is not connected to any unit
        operation. If neither `ID` nor `tickets` are given, the copy is
        named after the original stream with a "_copy" suffix.

        Examples
        --------
        >>> from flowsteam import Stream
        >>> s1 = Stream(1, 20.)
        >>> s1.copy()
        <Stream: s1_copy>
        >>> s1.copy('s2').F_mass
        20.0

        """
        if ID is None and tickets is None: ID = self._ID + '_copy'
        return Stream(ID, self._F_mass, tickets=tickets)

    # Representation
    def _info_header(self):
        """Return stream information header."""
        info = f"{type(self).__name__}: {self._ID}"
        if preferences.show_connections:
            source = self._source
            sink = self._sink
            if source is not None: info += f" from {source!r}"
            if sink is not None: info += f" to {sink!r}"
        return info

    def _info(self):
        """Return string with all specifications."""
        flow = preferences.format_flow(self._F_mass)
        return self._info_header() + f"\n flow ({preferences.flow_units}): {flow}"

    def show(self):
        """Print all specifications."""
        print(self._info())
    _ipython_display_ = show

    def print(self):
        """Print a one line summary of the stream."""
        print(f"Stream {self._ID} flow = {preferences.format_flow(self._F_mass)}")

    def __str__(self):
        return self._ID

    def __repr__(self):
        return f'<{type(self).__name__}: {self._ID}>'
