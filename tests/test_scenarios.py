import unittest
from singly_linked_list import *

SAMPLE_SIZES = (0, 1, 2, 5)

class TestScenarios(unittest.TestCase):
    def test_walkthrough(self):
        lst = LinkedList()
        lst.append(10)
        lst.append(20)
        lst.append(30)
        assert(lst.to_string() == "(10) -> (20) -> (30) -> null")

        lst.prepend(5)
        assert(lst.size() == 4)
        assert(lst.at(0).value == 5)

        lst.insert_at(15, 2)
        assert(lst.to_string() == "(5) -> (10) -> (15) -> (20) -> (30) -> null")

        removed = lst.remove_at(2)
        assert(removed.value == 15)
        assert(lst.size() == 4)

        popped = lst.pop()
        assert(popped.value == 30)
        assert(lst.to_string() == "(5) -> (10) -> (20) -> null")
        assert(lst.size() == 3)

    def test_empty_list(self):
        lst = LinkedList()
        assert(lst.size() == 0)
        assert(lst.to_string() == "null")
        for value in (0, None, "x"):
            assert(lst.find(value) == NOT_FOUND)
            assert(not lst.contains(value))

    def test_appends_render_in_order(self):
        for k in SAMPLE_SIZES:
            lst = LinkedList()
            values = [f"v{i}" for i in range(k)]
            for value in values:
                lst.append(value)

            expected = LINK_TXT.join([f"({v})" for v in values] + [TERMINAL_TXT])
            assert(lst.to_string() == expected)
            assert(lst.size() == k)

    def test_prepended_value_stays_at_front(self):
        lst = LinkedList([1, 2, 3])
        lst.prepend("x")
        lst.append(4)
        lst.insert_at(9, 3)
        lst.pop()
        lst.remove_at(2)
        assert(lst.at(0).value == "x")

        lst.insert_at("y", 0)
        assert(lst.at(0).value == "y")

    def test_insert_then_remove_restores_list(self):
        for k in SAMPLE_SIZES:
            before = list(range(k))
            for i in range(k + 1):
                lst = LinkedList(before)
                lst.insert_at("new", i)
                assert(lst.size() == k + 1)
                assert(lst.at(i).value == "new")
                lst.remove_at(i)
                assert(lst.values() == before)

    def test_find_matches_first_index(self):
        lst = LinkedList(["a", "b", "a", "c", "b"])
        for value in ("a", "b", "c", "z"):
            i = lst.find(value)
            if i == NOT_FOUND:
                assert(value not in lst.values())
                continue

            assert(lst.at(i).value == value)
            assert(value not in lst.values()[:i])

    def test_boundaries_raise_for_any_size(self):
        for k in SAMPLE_SIZES:
            lst = LinkedList(range(k))
            with self.assertRaises(IndexOutOfBounds):
                lst.at(lst.size())
            with self.assertRaises(IndexOutOfBounds):
                lst.insert_at("x", lst.size() + 1)
            with self.assertRaises(IndexOutOfBounds):
                lst.remove_at(lst.size())

            assert(lst.values() == list(range(k)))

    def test_chain_length_matches_size(self):
        lst = LinkedList(range(6))
        lst.remove_at(3)
        lst.insert_at(99, 1)
        lst.pop()

        hops = 0
        node = lst.head()
        while node is not None:
            node = node.next
            hops += 1
        assert(hops == lst.size())

if __name__ == '__main__':
    unittest.main()
