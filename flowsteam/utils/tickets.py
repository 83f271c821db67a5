# -*- coding: utf-8 -*-
# FlowSTEAM: Mass-Flow Simulation of Streams and Equipment Modules
# Copyright (C) 2020-2024, Yoel Cortes-Pena <yoelcortes@gmail.com>
#
# This module is under the UIUC open-source license. See
# github.com/BioSTEAMDevelopmentGroup/biosteam/blob/master/LICENSE.txt
# for license details.
"""
"""
__all__ = ('Tickets',)

class Tickets:
    """
    Create a Tickets object that hands out sequential IDs, a letter
    followed by a counter (e.g. 's1', 's2', ...). Each Tickets object keeps
    its own counter, so ID generation is explicit and reproducible.

    Parameters
    ----------
    letter :
        Starting letter of every ID. Defaults to 's'.
    start :
        Counter value before the first ticket is taken. Defaults to 0.

    Examples
    --------
    >>> from flowsteam import Tickets
    >>> tickets = Tickets()
    >>> tickets.take()
    's1'
    >>> tickets.take()
    's2'
    >>> tickets.reset()
    >>> tickets.take()
    's1'

    """
    __slots__ = ('letter', 'number')

    def __init__(self, letter: str='s', start: int=0):
        #: Starting letter of IDs.
        self.letter: str = letter

        #: Number of the last ticket taken.
        self.number: int = start

    def take(self) -> str:
        """Increase the counter and return the next ID."""
        self.number += 1
        return self.letter + str(self.number)

    def reset(self, start: int=0):
        """Reset the counter."""
        self.number = start

    def __repr__(self):
        return f"{type(self).__name__}(letter={self.letter!r}, start={self.number})"
