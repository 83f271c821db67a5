# -*- coding: utf-8 -*-
# FlowSTEAM: Mass-Flow Simulation of Streams and Equipment Modules
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
This module includes classes and functions concerning the inlet and outlet
slots of unit operations.
"""
from warnings import warn
from ..exceptions import DockingWarning

__all__ = ('StreamSequence', 'Inlets', 'Outlets')

# %% Unit operation inlets and outlets

class StreamSequence:
    """
    Abstract read-only sequence of streams docked to a unit operation.
    Streams may only be added through the unit operation (i.e.,
    :meth:`~flowsteam.Unit.add_input` and :meth:`~flowsteam.Unit.add_output`).

    """
    __slots__ = ('_unit', '_streams', '_capacity')

    def __init__(self, unit, capacity):
        self._unit = unit
        self._streams = []
        self._capacity = capacity

    @property
    def unit(self):
        """Unit operation that owns the slots."""
        return self._unit

    @property
    def capacity(self) -> int:
        """Maximum number of streams."""
        return self._capacity

    def isfull(self):
        """Return whether all slots are taken."""
        return len(self._streams) >= self._capacity

    def _append(self, stream):
        self._dock(stream)
        self._streams.append(stream)

    def index(self, stream):
        """Return index of stream."""
        for i, s in enumerate(self._streams):
            if s is stream: return i
        raise ValueError(f'{stream!r} is not in {type(self).__name__.lower()}')

    def __contains__(self, stream):
        return any([i is stream for i in self._streams])

    def __getitem__(self, index):
        streams = self._streams
        if isinstance(index, slice): return tuple(streams[index])
        return streams[index]

    def __iter__(self):
        return iter(tuple(self._streams))

    def __len__(self):
        return len(self._streams)

    def __repr__(self):
        return f"{type(self).__name__}([{', '.join([repr(i) for i in self._streams])}])"


class Inlets(StreamSequence):
    """Read-only sequence of inlet streams of a unit operation."""
    __slots__ = ()

    def _dock(self, stream):
        unit = self._unit
        sink = stream._sink
        if sink is not None and sink is not unit:
            warn(DockingWarning.from_source(
                    unit, f"{stream!r} is already an inlet of {sink!r}; "
                          f"its sink is now {unit!r}"
                 ), stacklevel=4)
        stream._sink = unit


class Outlets(StreamSequence):
    """Read-only sequence of outlet streams of a unit operation."""
    __slots__ = ()

    def _dock(self, stream):
        unit = self._unit
        source = stream._source
        if source is not None and source is not unit:
            warn(DockingWarning.from_source(
                    unit, f"{stream!r} is already an outlet of {source!r}; "
                          f"its source is now {unit!r}"
                 ), stacklevel=4)
        stream._source = unit
