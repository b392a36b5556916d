import unittest
from itertools import product
import numpy as np

from squareqr import SquareQR, DimensionError, SingularMatrixError
from squareqr.densebuffer import column_major
from squareqr.triangularsolver import solve_upper_triangular, solve_lower_triangular
from utils import backends, rand_matrix, rand_data, max_error

class TestTriangularSolver(unittest.TestCase):

    def setUp(self):
        self.squareqr = [SquareQR(backend) for backend in backends]
        self.sizes = [1, 2, 7, 40]

    def upper(self, sq, size):
        xp = sq.namespace
        data = xp.triu(rand_matrix(xp, size))
        return data, sq.dense_buffer(column_major(data), size)

    def test_upper(self):
        for sq, size in product(self.squareqr, self.sizes):
            xp = sq.namespace
            data, buf = self.upper(sq, size)
            rhs = rand_data(xp, size)
            y = xp.asarray(rhs, copy=True)
            solve_upper_triangular(buf, y)
            self.assertTrue(max_error(xp, xp.matmul(data, y), rhs) < 1e-12)

    def test_lower(self):
        for sq, size in product(self.squareqr, self.sizes):
            xp = sq.namespace
            data, buf = self.upper(sq, size)
            lower = xp.permute_dims(data, (1, 0))
            rhs = rand_data(xp, size)
            y = xp.asarray(rhs, copy=True)
            solve_lower_triangular(buf.transposed(), y)
            self.assertTrue(max_error(xp, xp.matmul(lower, y), rhs) < 1e-12)

    def test_ignores_other_triangle(self):
        for sq, size in product(self.squareqr, self.sizes):
            xp = sq.namespace
            full = rand_matrix(xp, size)
            buf = sq.dense_buffer(column_major(full), size)
            rhs = rand_data(xp, size)
            y = xp.asarray(rhs, copy=True)
            solve_upper_triangular(buf, y)
            self.assertTrue(max_error(xp, xp.matmul(xp.triu(full), y), rhs) < 1e-12)

    def test_multiple_columns(self):
        for sq, size in product(self.squareqr, self.sizes):
            xp = sq.namespace
            data, buf = self.upper(sq, size)
            rhs = rand_data(xp, size, size)
            store = column_major(xp.asarray(rhs, copy=True))
            for c in range(size):
                solve_upper_triangular(buf, store, c*size)
            sol = sq.dense_buffer(store, size).to_array()
            self.assertTrue(max_error(xp, xp.matmul(data, sol), rhs) < 1e-12)

    def test_singular(self):
        for sq, size in product(self.squareqr, self.sizes):
            xp = sq.namespace
            data, _ = self.upper(sq, size)
            data[size-1, size-1] = 0.0
            buf = sq.dense_buffer(column_major(data), size)
            rhs = rand_data(xp, size)
            y = xp.asarray(rhs, copy=True)
            self.assertRaises(SingularMatrixError, solve_upper_triangular, buf, y)
            self.assertRaises(SingularMatrixError, solve_lower_triangular, buf.transposed(), y)
            self.assertEqual(max_error(xp, y, rhs), 0.0)

    def test_tolerance(self):
        for sq in self.squareqr:
            xp = sq.namespace
            buf = sq.dense_buffer(xp.asarray([1.0, 0.0, 0.0, 1e-9]), 2)
            y = xp.asarray([1.0, 1.0])
            solve_upper_triangular(buf, y, tolerance=1e-12)
            self.assertTrue(np.allclose(np.asarray(y), [1.0, 1e9]))
            self.assertRaises(SingularMatrixError, solve_upper_triangular, buf, xp.asarray([1.0, 1.0]), 0, 1e-6)
            self.assertRaises(ValueError, solve_upper_triangular, buf, xp.asarray([1.0, 1.0]), 0, -1.0)

    def test_dimension(self):
        for sq in self.squareqr:
            xp = sq.namespace
            _, buf = self.upper(sq, 3)
            self.assertRaises(DimensionError, solve_upper_triangular, buf, rand_data(xp, 2))
            self.assertRaises(DimensionError, solve_upper_triangular, buf, rand_data(xp, 4), 2)
            self.assertRaises(DimensionError, solve_lower_triangular, buf, rand_data(xp, 3, 1))

if __name__ == '__main__':
    unittest.main()
