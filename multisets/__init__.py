# Copyright 2018 Harold Fellermann
#
# Permission is hereby granted, free of charge, to any person obtaining
# a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
# IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY
# CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
# TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
# SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.

"""Multisets with set algebra and configurable rendering

A multiset is an unordered collection where elements may repeat. This
package provides the multiset class, a dict from elements to their
non-negative multiplicities, together with union (pointwise maximum),
intersection (pointwise minimum), subset tests, equality and hashing.

>>> from multisets import multiset
>>> mset = multiset([1, 2, 2, 3, 3, 3])
>>> mset[3], len(mset)
(3, 6)
>>> print(mset)
{1,2,2,3,3,3}

How multisets are printed is controlled by the multisets.display
module.
"""

__version__ = '0.1.0'

from .structures import (
    InvalidMultiplicity, multiset, union, intersect, is_subset, to_set
)
from .display import (
    BRACES, SHORT, CONSTRUCTOR, DISPLAY_MODES,
    render, show, get_display_mode, set_display_mode, display_mode,
    set_short_show, set_long_show
)
