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
"""Textual rendering of multisets

Multisets can be rendered in one of three display modes:

    braces        {1,2,2,3}
    short         Multiset<int> with 4 elements
    constructor   Multiset(int[1,2,2,3])

render and show take the mode as an optional argument. If it is
omitted, the process-wide default is used, which can be queried with
get_display_mode and changed with set_display_mode or, temporarily,
with the display_mode context manager:

>>> from multisets import multiset
>>> with display_mode(SHORT):
...     print(multiset([1, 2, 2, 3]))
Multiset<int> with 4 elements

The default is shared by all threads and the last call to
set_display_mode wins. Pass the mode explicitly where this matters.
"""

import sys
import logging
import threading
import warnings
from contextlib import contextmanager


BRACES = 'braces'
SHORT = 'short'
CONSTRUCTOR = 'constructor'
DISPLAY_MODES = (BRACES, SHORT, CONSTRUCTOR)

_lock = threading.Lock()
_display_mode = BRACES


def _check_mode(mode):
    if mode not in DISPLAY_MODES:
        raise ValueError("display mode must be one of %s, got %r."
                         % (', '.join(DISPLAY_MODES), mode))


def get_display_mode():
    """The process-wide default display mode"""
    with _lock:
        return _display_mode


def set_display_mode(mode):
    """Change the process-wide default display mode

    The new mode affects all subsequent renderings of all multisets
    that do not specify a mode explicitly.
    """
    global _display_mode
    _check_mode(mode)
    with _lock:
        _display_mode = mode
    logging.debug("Multiset display mode set to %s.", mode)


@contextmanager
def display_mode(mode):
    """Temporarily change the process-wide default display mode"""
    previous = get_display_mode()
    set_display_mode(mode)
    try:
        yield mode
    finally:
        set_display_mode(previous)


def set_short_show():
    """Switch to short display mode (deprecated)"""
    warnings.warn("set_short_show is deprecated, use set_display_mode(SHORT).",
                  DeprecationWarning, stacklevel=2)
    set_display_mode(SHORT)


def set_long_show():
    """Switch to braces display mode (deprecated)"""
    warnings.warn("set_long_show is deprecated, use set_display_mode(BRACES).",
                  DeprecationWarning, stacklevel=2)
    set_display_mode(BRACES)


def _quoted(element):
    return '"%s"' % element if isinstance(element, str) else str(element)


def _braces(mset):
    return '{%s}' % ','.join(str(element) for element in mset.to_list())


def _short(mset):
    return 'Multiset<%s> with %d elements' % (mset.element_type.__name__, len(mset))


def _constructor(mset):
    return 'Multiset(%s[%s])' % (
        mset.element_type.__name__,
        ','.join(_quoted(element) for element in mset.to_list())
    )


_renderers = {
    BRACES: _braces,
    SHORT: _short,
    CONSTRUCTOR: _constructor,
}


def render(mset, mode=None):
    """Render mset as text in the given display mode

    If mode is None, the process-wide default is used.
    """
    if mode is None:
        mode = get_display_mode()
    _check_mode(mode)
    return _renderers[mode](mset)


def show(mset, file=None, mode=None):
    """Write the rendering of mset to file (default: sys.stdout)"""
    if file is None:
        file = sys.stdout
    file.write(render(mset, mode))
