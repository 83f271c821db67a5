# -*- coding: utf-8 -*-
# FlowSTEAM: Mass-Flow Simulation of Streams and Equipment Modules
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
import yaml
import os

__all__ = ('preferences', 'DisplayPreferences', 'TemporaryPreferences',
           'parse_units_notation')

def parse_units_notation(value):
    """
    Return units and notation from a "units:notation" string. Missing
    parts are returned as None.

    Examples
    --------
    >>> parse_units_notation('kg/hr:.3g')
    ('kg/hr', '.3g')
    >>> parse_units_notation(':.2f')
    (None, '.2f')

    """
    if value is None: return None, None
    units, _, notation = value.partition(':')
    return units or None, notation or None


class DisplayPreferences:
    """
    All preferences for FlowSTEAM results display.

    Examples
    --------
    >>> from flowsteam import preferences
    >>> with preferences.temporary():
    ...     preferences.reset()
    ...     preferences.show()
    DisplayPreferences:
    show_connections: True
    flow: 'kg/hr:.4g'

    """
    __slots__ = ('show_connections', 'flow_units', 'flow_notation')

    def __init__(self):
        #: Whether to show the source and sink unit operations of streams.
        self.show_connections: bool = True

        #: Units label of mass flow rates.
        self.flow_units: str = 'kg/hr'

        #: Format specification of mass flow rates.
        self.flow_notation: str = '.4g'

    def temporary(self):
        """Return a TemporaryPreferences object that will revert back to original
        preferences after context management."""
        return TemporaryPreferences()

    def reset(self, save=False):
        """Reset to FlowSTEAM defaults."""
        self.__init__()
        if save: self.save()

    @property
    def flow(self) -> str:
        """Mass flow rate units and notation."""
        return ":".join([self.flow_units, self.flow_notation])
    @flow.setter
    def flow(self, units_notation):
        units, notation = parse_units_notation(units_notation)
        if notation is not None:
            format(0., notation) # Raises ValueError if invalid
            self.flow_notation = notation
        if units is not None:
            self.flow_units = units

    def format_flow(self, F_mass):
        """Return mass flow rate as a string according to the flow notation."""
        return format(F_mass, self.flow_notation)

    def update(self, *, save=False, **kwargs):
        for i, j in kwargs.items():
            if i not in ('show_connections', 'flow'):
                raise AttributeError(f"{type(self).__name__} has no preference {i!r}")
            setattr(self, i, j)
        if save: self.save()

    @property
    def file(self):
        """Path to preferences file."""
        folder = os.path.dirname(__file__)
        return os.path.join(folder, 'preferences.yaml')

    def autoload(self):
        with open(self.file, 'r') as stream:
            data = yaml.safe_load(stream)
            if not isinstance(data, dict):
                raise ValueError('yaml file must return a dict')
        self.update(**data)

    def to_dict(self):
        """Return dictionary of all preferences."""
        return {
            'show_connections': self.show_connections,
            'flow': self.flow,
        }

    def save(self):
        """Save preferences."""
        with open(self.file, 'w') as file:
            yaml.safe_dump(self.to_dict(), file)

    def show(self):
        """Print all specifications."""
        dct = self.to_dict()
        print(f'{type(self).__name__}:\n' + '\n'.join([f"{i}: {repr(j)}" for i, j in dct.items()]))
    _ipython_display_ = show


class TemporaryPreferences:

    def __enter__(self):
        self.__dict__.update(preferences.to_dict())
        return preferences

    def __exit__(self, type, exception, traceback):
        preferences.update(**self.__dict__)


#: Display preferences of the session.
preferences: DisplayPreferences = DisplayPreferences()

if os.environ.get("FILTER_WARNINGS"):
    from warnings import filterwarnings; filterwarnings('ignore')
if not os.environ.get("DISABLE_PREFERENCES") == "1" and os.path.exists(preferences.file):
    preferences.autoload()
