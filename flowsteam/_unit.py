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
from typing import Optional, Iterable, Union
from ._stream import Stream
from .utils import AbstractMethod, format_title, piping
from .exceptions import (
    UnitInheritanceError, InputCapacityExceeded, OutputCapacityExceeded,
    IncompleteWiring, lb_warning,
)
from ._preferences import preferences

streams = Optional[Union[Stream, Iterable[Stream]]]

__all__ = ('Unit',)

# %% Unit Operation

class Unit:
    """
    Abstract class for Unit objects. Child objects must implement a
    :attr:`~Unit._run` method to estimate outlet mass flows from inlet mass
    flows, and may set the :attr:`~Unit._N_ins` and :attr:`~Unit._N_outs`
    class attributes to fix the number of inlet and outlet slots.

    Parameters
    ----------
    ID :
        Name of the unit operation, used only for display.
    ins :
        Inlet streams, added in order with :meth:`~Unit.add_input`.
        By default, inlets will be missing.
    outs :
        Outlet streams, added in order with :meth:`~Unit.add_output`.
        By default, outlets will be missing.

    Notes
    -----
    Streams are shared, not owned. A unit operation only holds references in
    its inlet and outlet slots, and :meth:`~Unit.run` overwrites the mass
    flow rate of outlet streams in place.

    Examples
    --------
    Create a new unit operation that sends all feed to its only outlet:

    >>> from flowsteam import Unit, Stream
    >>> class Pipe(Unit):
    ...     _N_ins = _N_outs = 1
    ...     def _run(self):
    ...         self.outs[0].F_mass = self.ins[0].F_mass
    >>> P1 = Pipe('P1', ins=Stream(1, 5.), outs=Stream(2))
    >>> P1.run()
    >>> P1.outs[0].F_mass
    5.0

    """
    _isabstract = True

    def __init_subclass__(cls, isabstract=False):
        super().__init_subclass__()
        dct = cls.__dict__
        if 'run' in dct:
            raise UnitInheritanceError(
                 "the 'run' method cannot be overridden; implement `_run` instead"
            )
        if 'line' not in dct:
            cls.line = format_title(cls.__name__)
        for name in ('_N_ins', '_N_outs'):
            N = getattr(cls, name)
            if not isinstance(N, int) or isinstance(N, bool) or N < 0:
                raise UnitInheritanceError(
                    f"'{name}' must be a non-negative integer, not {N!r}"
                )
        if not isabstract and not cls._run:
            raise UnitInheritanceError(
                "Unit subclass must implement a '_run' method unless the "
                "'isabstract' keyword argument is True"
            )
        cls._isabstract = isabstract

    ### Abstract Attributes ###

    #: **class-attribute** Maximum number of inlet streams.
    _N_ins: int = 1

    #: **class-attribute** Maximum number of outlet streams.
    _N_outs: int = 1

    #: **class-attribute** Human readable type of unit operation.
    line: str = 'Unit'

    ### Abstract methods ###

    #: Compute outlet mass flows from inlet mass flows (all slots are
    #: filled when this method is called).
    _run = AbstractMethod

    Inlets = piping.Inlets
    Outlets = piping.Outlets

    def __init__(self,
            ID: Optional[str]=None,
            ins: streams=None,
            outs: streams=None,
        ):
        if self._isabstract:
            raise UnitInheritanceError(
                f"cannot create {type(self).__name__} object; abstract unit "
                 "operations cannot be instantiated"
            )

        #: Name of the unit operation.
        self.ID: Optional[str] = ID

        self._ins = self.Inlets(self, self._N_ins)
        self._outs = self.Outlets(self, self._N_outs)
        ins = self._as_streams(ins)
        outs = self._as_streams(outs)
        for i in ins + outs: self._assert_stream(i)
        connections = [(i, i._source, i._sink) for i in ins + outs]
        try:
            for i in ins: self.add_input(i)
            for i in outs: self.add_output(i)
        except Exception:
            # Streams must not remain docked to a unit that was never created
            for stream, source, sink in connections:
                stream._source = source
                stream._sink = sink
            raise

    @staticmethod
    def _as_streams(streams):
        if streams is None: return ()
        elif isinstance(streams, Stream): return (streams,)
        else: return tuple(streams)

    @staticmethod
    def _assert_stream(stream):
        if not isinstance(stream, Stream):
            raise TypeError(f"only Stream objects are valid, not {type(stream).__name__!r} objects")

    # Inlet and outlet streams
    @property
    def ins(self) -> piping.Inlets:
        """Read-only sequence of inlet streams."""
        return self._ins

    @property
    def outs(self) -> piping.Outlets:
        """Read-only sequence of outlet streams."""
        return self._outs

    def add_input(self, stream: Stream):
        """
        Add an inlet stream in the next empty slot.

        Raises
        ------
        InputCapacityExceeded
            If all inlet slots are taken.

        """
        self._assert_stream(stream)
        ins = self._ins
        if ins.isfull():
            raise InputCapacityExceeded.from_source(
                self, f"inlet stream limit reached ({ins.capacity})",
                capacity=ins.capacity,
            )
        ins._append(stream)

    def add_output(self, stream: Stream):
        """
        Add an outlet stream in the next empty slot.

        Raises
        ------
        OutputCapacityExceeded
            If all outlet slots are taken.

        """
        self._assert_stream(stream)
        outs = self._outs
        if outs.isfull():
            raise OutputCapacityExceeded.from_source(
                self, f"outlet stream limit reached ({outs.capacity})",
                capacity=outs.capacity,
            )
        outs._append(stream)

    # Simulation
    def _check_wiring(self):
        missing_ins = self._N_ins - len(self._ins)
        missing_outs = self._N_outs - len(self._outs)
        if missing_ins or missing_outs:
            raise IncompleteWiring.from_source(
                self, f"{self.line.lower()} requires exactly {self._N_ins} "
                      f"inputs and {self._N_outs} outputs",
                missing_ins=missing_ins, missing_outs=missing_outs,
            )

    def _check_feeds(self):
        for s in self._ins:
            F_mass = s.F_mass
            if F_mass < 0.:
                lb_warning(self, f'{s} mass flow', F_mass,
                           preferences.flow_units, 0., stacklevel=4)

    def run(self):
        """
        Check that all inlet and outlet slots are filled and overwrite
        outlet mass flows from current inlet mass flows.

        Raises
        ------
        IncompleteWiring
            If any inlet or outlet slot is empty. No stream is read or
            written in this case.

        """
        self._check_wiring()
        self._check_feeds()
        self._run()

    update_outputs = run

    def empty(self):
        """Set mass flow rate of all outlets to zero."""
        for i in self._outs: i.empty()

    # Mass flow rates
    @property
    def F_mass_in(self) -> float:
        """Net mass flow going in."""
        return sum([s.F_mass for s in self._ins])
    @property
    def F_mass_out(self) -> float:
        """Net mass flow going out."""
        return sum([s.F_mass for s in self._outs])

    def mass_balance_error(self):
        """Return error in mass balance. If positive, mass is being created.
        If negative, mass is being destroyed."""
        return self.F_mass_out - self.F_mass_in

    def results(self):
        """Return a pandas DataFrame of inlet and outlet mass flows."""
        from .report import stream_table
        return stream_table([*self._ins, *self._outs])

    # Representation
    def _info(self):
        """Information on unit."""
        info = (f'{type(self).__name__}: {self}\n'
                + 'ins...\n')
        flow_units = preferences.flow_units
        format_flow = preferences.format_flow
        for i, stream in enumerate(self._ins):
            source = stream.source
            source_info = f'  from  {source!r}' if source else ''
            info += (f'[{i}] {stream}{source_info}\n'
                     f'    flow ({flow_units}): {format_flow(stream.F_mass)}\n')
        info += 'outs...\n'
        for i, stream in enumerate(self._outs):
            sink = stream.sink
            sink_info = f'  to  {sink!r}' if sink else ''
            info += (f'[{i}] {stream}{sink_info}\n'
                     f'    flow ({flow_units}): {format_flow(stream.F_mass)}\n')
        return info[:-1]

    def show(self):
        """Print information on unit."""
        print(self._info())
    _ipython_display_ = show

    def __str__(self):
        return self.ID or type(self).__name__

    def __repr__(self):
        if self.ID:
            return f'<{type(self).__name__}: {self.ID}>'
        else:
            return f'<{type(self).__name__}>'
