import unittest

from point_set import PointSet


X_RANGE = range(-100, 101)
Y_RANGE = range(-200, 201)


class TestGridContainment(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.points = [(x, y) for x in X_RANGE for y in Y_RANGE]
        cls.point_set = PointSet()
        for x, y in cls.points:
            cls.point_set.insert(x, y)

    def test_cardinality(self):
        self.assertEqual(len(self.points), len(X_RANGE) * len(Y_RANGE))
        self.assertEqual(self.point_set.len(), len(self.points))

    def test_members_present(self):
        for x, y in self.points:
            self.assertTrue(self.point_set.contains(x, y))

    def test_broader_points(self):
        mismatches = []
        for x in range(-1000, 1001):
            in_x = x in X_RANGE
            for y in range(-2000, 2001):
                if self.point_set.contains(x, y) != (in_x and y in Y_RANGE):
                    mismatches.append((x, y))
        self.assertEqual(mismatches, [])

    def test_iteration_matches_inserts(self):
        members = list(self.point_set.iterate())
        self.assertEqual(len(members), self.point_set.len())
        self.assertEqual(set(members), set(self.points))

    def test_union_of_halves(self):
        left = PointSet((x, y) for x, y in self.points if x < 0)
        right = PointSet((x, y) for x, y in self.points if x >= 0)
        self.assertEqual(left.union(right), self.point_set)
        self.assertEqual(len(left | right), len(self.points))


if __name__ == "__main__":
    unittest.main()
