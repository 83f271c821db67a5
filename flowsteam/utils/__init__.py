# -*- coding: utf-8 -*-
# FlowSTEAM: Mass-Flow Simulation of Streams and Equipment Modules
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
from . import (
    misc,
    piping,
    tickets,
)
__all__ = (
    *misc.__all__,
    *piping.__all__,
    *tickets.__all__,
)
from .misc import *
from .piping import *
from .tickets import *
