"""Tests for the multisets.display module"""
import importlib
import io
import threading
import unittest

from multisets import display
from multisets.structures import multiset


class TestRender(unittest.TestCase):
    """Rendering with explicit display modes"""
    def test_braces(self):
        """braces form lists sorted elements"""
        mset = multiset([3, 1, 2, 3, 2, 3])
        self.assertEqual(display.render(mset, display.BRACES), '{1,2,2,3,3,3}')

    def test_braces_empty(self):
        """empty multisets render as {}"""
        self.assertEqual(display.render(multiset(), display.BRACES), '{}')

    def test_braces_strings(self):
        """strings are not quoted in braces form"""
        mset = multiset(['b', 'a'])
        self.assertEqual(display.render(mset, display.BRACES), '{a,b}')

    def test_braces_unorderable(self):
        """unorderable elements are rendered in storage order"""
        mset = multiset.of(2, 'a')
        self.assertEqual(display.render(mset, display.BRACES), '{2,a}')

    def test_short(self):
        """short form names element type and size"""
        mset = multiset([1, 2, 2, 3, 3, 3])
        self.assertEqual(display.render(mset, display.SHORT),
                         'Multiset<int> with 6 elements')
        self.assertEqual(display.render(multiset(), display.SHORT),
                         'Multiset<object> with 0 elements')

    def test_constructor(self):
        """constructor form embeds type name and sorted elements"""
        mset = multiset([2, 1, 2])
        self.assertEqual(display.render(mset, display.CONSTRUCTOR),
                         'Multiset(int[1,2,2])')

    def test_constructor_strings(self):
        """constructor form quotes string elements"""
        mset = multiset(['b', 'a', 'a'])
        self.assertEqual(display.render(mset, display.CONSTRUCTOR),
                         'Multiset(str["a","a","b"])')

    def test_constructor_empty(self):
        """empty multisets render as an empty constructor call"""
        self.assertEqual(display.render(multiset(), display.CONSTRUCTOR),
                         'Multiset(object[])')

    def test_zero_entries(self):
        """zero entries are not rendered"""
        mset = multiset({'a':1, 'b':0})
        self.assertEqual(display.render(mset, display.BRACES), '{a}')
        self.assertEqual(display.render(mset, display.SHORT),
                         'Multiset<str> with 1 elements')

    def test_unknown_mode(self):
        """unknown display modes raise ValueError"""
        with self.assertRaises(ValueError):
            display.render(multiset(), 'verbose')

    def test_format(self):
        """format specs select the display mode"""
        mset = multiset([1, 1])
        self.assertEqual(format(mset, 'short'), 'Multiset<int> with 2 elements')
        self.assertEqual('{:constructor}'.format(mset), 'Multiset(int[1,1])')
        with self.assertRaises(ValueError):
            format(mset, 'x')

    def test_show(self):
        """show writes the rendering to the given stream"""
        stream = io.StringIO()
        result = display.show(multiset([2, 1]), stream, display.BRACES)
        self.assertIsNone(result)
        self.assertEqual(stream.getvalue(), '{1,2}')


class TestDisplayMode(unittest.TestCase):
    """Process-wide default display mode"""
    def setUp(self):
        self.previous = display.get_display_mode()

    def tearDown(self):
        display.set_display_mode(self.previous)

    def test_default(self):
        """braces form is the default"""
        display.set_display_mode(display.SHORT)
        importlib.reload(display)
        self.assertEqual(display.get_display_mode(), display.BRACES)
        self.assertEqual(str(multiset([2, 1])), '{1,2}')
        self.assertEqual(display.DISPLAY_MODES,
                         (display.BRACES, display.SHORT, display.CONSTRUCTOR))

    def test_set_display_mode(self):
        """the default mode affects str and render"""
        mset = multiset([1, 2, 2])
        display.set_display_mode(display.SHORT)
        self.assertEqual(display.get_display_mode(), display.SHORT)
        self.assertEqual(str(mset), 'Multiset<int> with 3 elements')
        self.assertEqual(display.render(mset), 'Multiset<int> with 3 elements')
        display.set_display_mode(display.BRACES)
        self.assertEqual(str(mset), '{1,2,2}')
        self.assertEqual('{}'.format(mset), '{1,2,2}')

    def test_set_display_mode_invalid(self):
        """invalid modes are rejected and the mode is kept"""
        display.set_display_mode(display.CONSTRUCTOR)
        with self.assertRaises(ValueError):
            display.set_display_mode('long')
        self.assertEqual(display.get_display_mode(), display.CONSTRUCTOR)

    def test_explicit_mode_wins(self):
        """an explicit mode overrides the default"""
        display.set_display_mode(display.SHORT)
        self.assertEqual(display.render(multiset([1]), display.BRACES), '{1}')

    def test_context_manager(self):
        """display_mode restores the previous mode"""
        display.set_display_mode(display.BRACES)
        with display.display_mode(display.CONSTRUCTOR):
            self.assertEqual(str(multiset('ba')), 'Multiset(str["a","b"])')
        self.assertEqual(display.get_display_mode(), display.BRACES)

    def test_context_manager_on_error(self):
        """display_mode restores the previous mode on exceptions"""
        display.set_display_mode(display.BRACES)
        with self.assertRaises(KeyError):
            with display.display_mode(display.SHORT):
                raise KeyError
        self.assertEqual(display.get_display_mode(), display.BRACES)

    def test_show_default(self):
        """show uses the default mode"""
        stream = io.StringIO()
        display.set_display_mode(display.SHORT)
        display.show(multiset('aa'), stream)
        self.assertEqual(stream.getvalue(), 'Multiset<str> with 2 elements')

    def test_mode_visible_across_threads(self):
        """the default mode is shared by all threads"""
        display.set_display_mode(display.BRACES)
        thread = threading.Thread(target=display.set_display_mode,
                                  args=(display.SHORT,))
        thread.start()
        thread.join()
        self.assertEqual(display.get_display_mode(), display.SHORT)

    def test_set_short_show(self):
        """set_short_show is deprecated but still works"""
        with self.assertWarns(DeprecationWarning):
            display.set_short_show()
        self.assertEqual(display.get_display_mode(), display.SHORT)

    def test_set_long_show(self):
        """set_long_show is deprecated but still works"""
        display.set_display_mode(display.SHORT)
        with self.assertWarns(DeprecationWarning):
            display.set_long_show()
        self.assertEqual(display.get_display_mode(), display.BRACES)


class TestScenario(unittest.TestCase):
    """End to end usage"""
    def test_counts_and_rendering(self):
        """a multiset of 1, 2, 2, 3, 3, 3"""
        mset = multiset([1, 2, 2, 3, 3, 3])
        self.assertEqual(mset[3], 3)
        self.assertEqual(len(mset), 6)
        with display.display_mode(display.BRACES):
            self.assertEqual(str(mset), '{1,2,2,3,3,3}')


if __name__ == '__main__':
    unittest.main()
