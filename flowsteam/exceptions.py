# -*- coding: utf-8 -*-
# FlowSTEAM: Mass-Flow Simulation of Streams and Equipment Modules
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
from warnings import warn

__all__ = (
    'UnitInheritanceError',
    'StreamConnectionError',
    'InputCapacityExceeded',
    'OutputCapacityExceeded',
    'IncompleteWiring',
    'UnitWarning',
    'DesignWarning',
    'DockingWarning',
    'lb_warning',
    'message_with_object_stamp',
)

def message_with_object_stamp(object, msg):
    return repr(object) + ' ' + msg

# %% FlowSTEAM errors

class UnitInheritanceError(TypeError):
    """TypeError regarding unit subclass definition and instantiation."""

class StreamConnectionError(RuntimeError):
    """RuntimeError regarding inlet and outlet connections of a unit operation."""

    def __init__(self, msg, unit=None):
        super().__init__(msg)
        self.unit = unit

    @classmethod
    def from_source(cls, source, msg, **kwargs):
        """Return an error with source description."""
        return cls(message_with_object_stamp(source, msg), source, **kwargs)


class InputCapacityExceeded(StreamConnectionError):
    """StreamConnectionError raised when all inlet slots are already taken."""

    def __init__(self, msg, unit=None, capacity=None):
        super().__init__(msg, unit)
        self.capacity = capacity


class OutputCapacityExceeded(StreamConnectionError):
    """StreamConnectionError raised when all outlet slots are already taken."""

    def __init__(self, msg, unit=None, capacity=None):
        super().__init__(msg, unit)
        self.capacity = capacity


class IncompleteWiring(StreamConnectionError):
    """StreamConnectionError raised when a unit operation is run with empty
    inlet or outlet slots."""

    def __init__(self, msg, unit=None, missing_ins=0, missing_outs=0):
        super().__init__(msg, unit)
        self.missing_ins = missing_ins
        self.missing_outs = missing_outs

# %% FlowSTEAM warnings

class UnitWarning(Warning):
    """Warning regarding unit operations."""

    @classmethod
    def from_source(cls, source, msg):
        """Return a warning object with source description."""
        msg = message_with_object_stamp(source, msg)
        return cls(msg)

class DesignWarning(UnitWarning):
    """Warning regarding values out of bounds."""

class DockingWarning(UnitWarning):
    """Warning regarding streams docked to more than one unit operation."""

# %% Bounds checking

def lb_warning(source, key, value, units, lb, stacklevel=2):
    units = ' ' + units if units else ''
    msg = f"{key} ({value:.4g}{units}) is out of bounds (minimum {lb:.4g}{units})"
    warn(DesignWarning.from_source(source, msg), stacklevel=stacklevel)
