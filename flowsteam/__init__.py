# -*- coding: utf-8 -*-
# FlowSTEAM: Mass-Flow Simulation of Streams and Equipment Modules
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
.. contents:: :local:

"""
from __future__ import annotations
__version__ = '0.1.0'

# %% Initialize FlowSTEAM

from . import exceptions
from . import utils
from .utils import Tickets
from ._preferences import preferences
from ._stream import Stream
from ._unit import Unit
from . import units
from .units import *
from . import report

__all__ = (
    'Stream', 'Unit', 'Tickets', 'preferences', 'exceptions', 'utils',
    'units', 'report', *units.__all__,
)
