import unittest
from unittest import mock
from linked_container import *
from linked_container import demo
from linked_container.txt_strs import TXTS

class TestDemo(unittest.TestCase):
    def setUp(self):
        self.lines = []

    def test_demo_sequence(self):
        snap = demo.run_demo(out=self.lines.append)

        assert(self.lines[0] == TXTS["title"])
        assert(self.lines[1] == "[Apple, Banana, Orange, Grape]")
        assert("Size: 4" in self.lines)
        assert("Is empty: false" in self.lines)
        assert("Element at index 1: Banana" in self.lines)
        assert("Element at index 2: Orange" in self.lines)
        assert("Contains 'Apple': true" in self.lines)
        assert("Contains 'Mango': false" in self.lines)
        assert("Index of 'Orange': 2" in self.lines)
        assert("Index of 'Mango': -1" in self.lines)
        assert("Removed element at index 1: Banana" in self.lines)
        assert("Container after removal: [Apple, Orange, Grape]" in self.lines)
        assert("'Grape' removed: true" in self.lines)
        assert("Container after removal: [Apple, Orange]" in self.lines)
        assert("Container after clear: []" in self.lines)
        assert(self.lines[-3:] == ["Size: 0", "Is empty: true", TXTS["done"]])

        assert(snap.is_empty)
        assert(snap.size == 0)

    def test_demo_uses_given_container(self):
        container = LinkedListContainer()
        demo.run_demo(container, out=self.lines.append)
        assert(container.is_empty())
        assert(container.head is None and container.tail is None)

    def test_main_logs_and_reraises(self):
        with mock.patch.object(demo, "run_demo", side_effect=IndexOutOfRange(1, 0)), \
                mock.patch.object(demo, "what_exception") as what, \
                mock.patch.object(demo, "log_exception") as log:
            with self.assertRaises(IndexOutOfRange):
                demo.main()

        what.assert_called_once()
        log.assert_called_once()

    def test_main_prints_demo(self):
        with mock.patch("builtins.print") as fake_print:
            snap = demo.main()

        assert(snap.is_empty)
        fake_print.assert_any_call("[Apple, Banana, Orange, Grape]")

if __name__ == '__main__':
    unittest.main()
