# -*- coding: utf-8 -*-
# FlowSTEAM: Mass-Flow Simulation of Streams and Equipment Modules
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
import pytest
import flowsteam as fst
from flowsteam import exceptions
from numpy.testing import assert_allclose

class Pipe(fst.Unit):
    _N_ins = 1
    _N_outs = 1

    def _run(self):
        self.outs[0].F_mass = self.ins[0].F_mass


class Splitter(fst.Unit):
    _N_ins = 1
    _N_outs = 3

    def _run(self):
        F_mass = self.ins[0].F_mass
        for i in self.outs: i.F_mass = F_mass / 3


def test_unit_inheritance():
    with pytest.raises(exceptions.UnitInheritanceError):
        class NewUnit(fst.Unit): pass

    with pytest.raises(exceptions.UnitInheritanceError):
        class NewUnit(fst.Unit):
            def run(self): pass

    with pytest.raises(exceptions.UnitInheritanceError):
        class NewUnit(fst.Unit):
            _N_ins = -1
            def _run(self): pass

    with pytest.raises(exceptions.UnitInheritanceError):
        class NewUnit(fst.Unit):
            _N_outs = 1.5
            def _run(self): pass

    class AbstractUnit(fst.Unit, isabstract=True):
        _N_ins = 2

    class NewUnit(AbstractUnit):
        def _run(self): pass

    unit = NewUnit()
    assert unit.ins.capacity == 2
    assert unit.outs.capacity == 1
    assert NewUnit.line == 'New unit'

def test_abstract_units_cannot_be_created():
    with pytest.raises(exceptions.UnitInheritanceError):
        fst.Unit()

    class AbstractUnit(fst.Unit, isabstract=True): pass

    with pytest.raises(exceptions.UnitInheritanceError):
        AbstractUnit()

def test_generic_capacity_errors():
    tickets = fst.Tickets()
    S1 = Splitter('S1')
    S1.add_input(fst.Stream(tickets=tickets))
    with pytest.raises(exceptions.InputCapacityExceeded, match='inlet stream limit') as excinfo:
        S1.add_input(fst.Stream(tickets=tickets))
    assert excinfo.value.unit is S1
    assert excinfo.value.capacity == 1
    assert len(S1.ins) == 1
    outs = [fst.Stream(tickets=tickets) for i in range(3)]
    for i in outs: S1.add_output(i)
    extra = fst.Stream(tickets=tickets)
    with pytest.raises(exceptions.OutputCapacityExceeded, match='outlet stream limit'):
        S1.add_output(extra)
    assert list(S1.outs) == outs
    assert extra.source is None
    assert isinstance(excinfo.value, exceptions.StreamConnectionError)
    assert not isinstance(excinfo.value, exceptions.OutputCapacityExceeded)

def test_only_streams_are_valid():
    P1 = Pipe()
    with pytest.raises(TypeError):
        P1.add_input('s1')
    with pytest.raises(TypeError):
        P1.add_output(1.)
    assert len(P1.ins) == len(P1.outs) == 0

def test_read_only_streams():
    s1 = fst.Stream(1)
    P1 = Pipe('P1', ins=s1, outs=fst.Stream(2))
    with pytest.raises(TypeError):
        P1.ins[0] = fst.Stream(3)
    with pytest.raises(AttributeError):
        P1.ins = [fst.Stream(3)]
    with pytest.raises(AttributeError):
        P1.outs = [fst.Stream(3)]
    with pytest.raises(AttributeError):
        P1.ins.append(fst.Stream(3))
    assert P1.ins[0] is s1
    assert P1.ins[:] == (s1,)
    assert s1 in P1.ins
    assert P1.ins.index(s1) == 0
    with pytest.raises(ValueError):
        P1.outs.index(s1)
    assert P1.ins.isfull() and P1.outs.isfull()
    assert P1.ins.unit is P1
    assert repr(P1.ins) == 'Inlets([<Stream: s1>])'

def test_incomplete_wiring():
    s1 = fst.Stream(1, 9.)
    s2 = fst.Stream(2)
    S1 = Splitter('S1', ins=s1, outs=s2)
    with pytest.raises(exceptions.IncompleteWiring, match='requires exactly 1 inputs and 3 outputs') as excinfo:
        S1.run()
    assert excinfo.value.missing_ins == 0
    assert excinfo.value.missing_outs == 2
    assert s2.F_mass == 0.
    S1.add_output(fst.Stream(3))
    S1.add_output(fst.Stream(4))
    S1.run()
    assert_allclose([i.F_mass for i in S1.outs], [3., 3., 3.])

def test_update_outputs_is_run():
    P1 = Pipe(ins=fst.Stream(1, 4.), outs=fst.Stream(2))
    P1.update_outputs()
    assert P1.outs[0].F_mass == 4.

def test_negative_feed_warning():
    P1 = Pipe('P1', ins=fst.Stream(1, -2.), outs=fst.Stream(2))
    with pytest.warns(exceptions.DesignWarning, match='out of bounds'):
        P1.run()
    assert P1.outs[0].F_mass == -2.

def test_docking_warning():
    s1 = fst.Stream(1)
    P1 = Pipe('P1', ins=s1)
    with pytest.warns(exceptions.DockingWarning):
        P2 = Pipe('P2', ins=s1)
    assert s1.sink is P2
    assert P1.ins[0] is s1

def test_failed_construction_restores_connections():
    s1 = fst.Stream(1)
    P1 = Pipe('P1', ins=s1)
    with pytest.warns(exceptions.DockingWarning):
        with pytest.raises(exceptions.InputCapacityExceeded):
            Pipe('P2', ins=(s1, fst.Stream(2)))
    assert s1.sink is P1
    s3 = fst.Stream(3)
    with pytest.raises(TypeError):
        Pipe('P3', ins=s3, outs=['s4'])
    assert s3.sink is None

def test_mass_balance():
    S1 = Splitter('S1', ins=fst.Stream(1, 9.), outs=[fst.Stream(i) for i in (2, 3, 4)])
    assert S1.F_mass_in == 9.
    assert S1.F_mass_out == 0.
    assert S1.mass_balance_error() == -9.
    S1.run()
    assert_allclose(S1.F_mass_out, 9.)
    assert_allclose(S1.mass_balance_error(), 0., atol=1e-12)
    S1.empty()
    assert S1.F_mass_out == 0.
    assert S1.F_mass_in == 9.

def test_unit_representation(capsys):
    P1 = Pipe('P1', ins=fst.Stream(1, 4.), outs=fst.Stream(2))
    assert repr(P1) == '<Pipe: P1>'
    assert str(P1) == 'P1'
    assert repr(Pipe()) == '<Pipe>'
    assert str(Pipe()) == 'Pipe'
    P1.run()
    P1.show()
    assert capsys.readouterr().out == (
        "Pipe: P1\n"
        "ins...\n"
        "[0] s1\n"
        "    flow (kg/hr): 4\n"
        "outs...\n"
        "[0] s2\n"
        "    flow (kg/hr): 4\n"
    )

if __name__ == '__main__':
    test_unit_inheritance()
    test_abstract_units_cannot_be_created()
    test_generic_capacity_errors()
    test_only_streams_are_valid()
    test_read_only_streams()
    test_incomplete_wiring()
    test_update_outputs_is_run()
    test_negative_feed_warning()
    test_docking_warning()
    test_failed_construction_restores_connections()
    test_mass_balance()
