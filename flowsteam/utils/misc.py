# -*- coding: utf-8 -*-
# FlowSTEAM: Mass-Flow Simulation of Streams and Equipment Modules
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
This module includes arbitrary classes and functions.

"""
__all__ = ('AbstractMethod', 'format_title', 'ticket_number')

# %% Abstract methods

class AbstractMethodType:
    __slots__ = ()

    @property
    def __name__(self): return "AbstractMethod"
    def __new__(self): return AbstractMethod
    def __call__(self, *args, **kwargs): return NotImplemented
    def __bool__(self): return False
    def __repr__(self): return "AbstractMethod"

#: Falsy placeholder for methods that subclasses must implement.
AbstractMethod = object.__new__(AbstractMethodType)

# %% String functions

def format_title(line):
    """
    Return a title from a class name or an identifier.

    Examples
    --------
    >>> format_title('Absorber')
    'Absorber'
    >>> format_title('VentScrubber')
    'Vent scrubber'
    >>> format_title('mass_balance')
    'Mass balance'

    """
    line = line.replace('_', ' ')
    words = []
    word = ''
    last = ''
    for i in line:
        if i.isupper() and last.isalpha() and not last.isupper():
            words.append(word)
            word = i
        else:
            word += i
        last = i
    words.append(word)
    words = [i.strip() for i in words if i.strip()]
    first_word, *rest = words
    words = [first_word[0].capitalize() + first_word[1:]]
    for word in rest:
        if not word.isupper(): word = word.lower()
        words.append(word)
    return ' '.join(words)

def ticket_number(ID):
    """Return the number of a ticket-like ID (e.g. 's12' -> 12) or -1."""
    num = ID[1:]
    if num.isnumeric(): return int(num)
    else: return -1
