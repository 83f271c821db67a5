# -*- coding: utf-8 -*-
# FlowSTEAM: Mass-Flow Simulation of Streams and Equipment Modules
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
import numpy as np
from .._unit import Unit
from ..exceptions import InputCapacityExceeded, OutputCapacityExceeded

__all__ = ('Absorber',)

class Absorber(Unit):
    """
    Create an absorber that combines the mass flow of two inlet streams and
    splits the total between two outlets at fixed fractions: 30% to the
    first outlet and 70% to the second.

    Parameters
    ----------
    ins :
        [0] Feed

        [1] Feed
    outs :
        [0] Outlet with 30% of total inlet mass flow.

        [1] Outlet with 70% of total inlet mass flow.

    Examples
    --------
    >>> from flowsteam import Absorber, Stream, Tickets
    >>> tickets = Tickets()
    >>> feed_a = Stream(tickets=tickets, F_mass=60.)
    >>> feed_b = Stream(tickets=tickets, F_mass=40.)
    >>> A1 = Absorber('A1', ins=(feed_a, feed_b))
    >>> A1.add_output(Stream(tickets=tickets))
    >>> A1.add_output(Stream(tickets=tickets))
    >>> A1.run()
    >>> A1.show()
    Absorber: A1
    ins...
    [0] s1
        flow (kg/hr): 60
    [1] s2
        flow (kg/hr): 40
    outs...
    [0] s3
        flow (kg/hr): 30
    [1] s4
        flow (kg/hr): 70

    A third inlet is rejected:

    >>> A1.add_input(Stream(tickets=tickets))
    Traceback (most recent call last):
    flowsteam.exceptions.InputCapacityExceeded: <Absorber: A1> too many inputs for absorber

    """
    _N_ins = _N_outs = 2

    #: **class-attribute** Fraction of total inlet mass flow sent to each outlet.
    _split = np.array([0.3, 0.7])

    @property
    def split(self):
        """[tuple] Fraction of total inlet mass flow sent to each outlet."""
        return tuple(self._split.tolist())

    def add_input(self, stream):
        self._assert_stream(stream)
        ins = self._ins
        if len(ins) >= self._N_ins:
            raise InputCapacityExceeded.from_source(
                self, 'too many inputs for absorber', capacity=self._N_ins
            )
        ins._append(stream)

    def add_output(self, stream):
        self._assert_stream(stream)
        outs = self._outs
        if len(outs) >= self._N_outs:
            raise OutputCapacityExceeded.from_source(
                self, 'too many outputs for absorber', capacity=self._N_outs
            )
        outs._append(stream)

    def _run(self):
        feed_a, feed_b = self._ins
        F_mass = feed_a.F_mass + feed_b.F_mass
        for outlet, F_mass_outlet in zip(self._outs, F_mass * self._split):
            outlet.F_mass = F_mass_outlet
