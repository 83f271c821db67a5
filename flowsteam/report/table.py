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
import pandas as pd
from .._preferences import preferences
from ..utils import ticket_number

DataFrame = pd.DataFrame

__all__ = ('stream_table', 'mass_balance_table')

def _stream_key(s):
    return ticket_number(s.ID)

# %% Streams

def stream_table(streams):
    """
    Return a stream table as a pandas DataFrame object, with one column per
    named stream sorted by ID. Streams with an empty ID are not shown.

    Parameters
    ----------
    streams : Iterable[Stream]

    Examples
    --------
    >>> from flowsteam import Absorber, Stream, report
    >>> A1 = Absorber('A1', ins=[Stream(2, 15.), Stream(1, 10.)],
    ...               outs=[Stream(3), Stream(4)])
    >>> A1.run()
    >>> table = report.stream_table(A1.ins)
    >>> list(table.columns)
    ['s1', 's2']
    >>> table.loc['Sink'].tolist()
    ['A1', 'A1']
    >>> table.loc['flow (kg/hr)'].tolist()
    [10.0, 15.0]

    """
    unique = list({id(i): i for i in streams if i.ID}.values())
    ss = sorted(sorted(unique, key=lambda i: i.ID), key=_stream_key)
    n = len(ss)
    array = np.empty((3, n), dtype=object)
    sources = array[0, :]
    sinks = array[1, :]
    flows = array[2, :]
    IDs = n*[None]
    for j, s in enumerate(ss):
        IDs[j] = s.ID
        sources[j] = str(s.source) if s.source else '-'
        sinks[j] = str(s.sink) if s.sink else '-'
        flows[j] = s.F_mass
    index = (
        'Source',
        'Sink',
        f'flow ({preferences.flow_units})',
    )
    return DataFrame(array, columns=IDs, index=index)

# %% Unit operations

def mass_balance_table(units):
    """
    Return a pandas DataFrame object of net mass flows going in and out of
    each unit operation, and the error in mass balance.

    Parameters
    ----------
    units : Iterable[Unit]

    """
    units = list(units)
    data = np.array(
        [(i.F_mass_in, i.F_mass_out, i.mass_balance_error()) for i in units],
        dtype=float,
    ).reshape((len(units), 3))
    return DataFrame(
        data,
        index=[str(i) for i in units],
        columns=('Mass in', 'Mass out', 'Error'),
    )
