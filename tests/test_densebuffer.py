import unittest
from itertools import product

from squareqr import SquareQR, DimensionError
from utils import backends, max_error

class TestDenseBuffer(unittest.TestCase):

    def setUp(self):
        self.squareqr = [SquareQR(backend) for backend in backends]
        self.sizes = [1, 2, 5, 16]

    def test_construction(self):
        for sq in self.squareqr:
            xp = sq.namespace
            store = xp.zeros(9, dtype=xp.float64)
            buf = sq.dense_buffer(store, 3)
            self.assertEqual(buf.dimension, 3)
            self.assertEqual((buf.offset, buf.row_stride, buf.col_stride), (0, 1, 3))

            self.assertRaises(DimensionError, sq.dense_buffer, store, 0)
            self.assertRaises(DimensionError, sq.dense_buffer, store, -1)
            self.assertRaises(DimensionError, sq.dense_buffer, store, 4)
            self.assertRaises(DimensionError, sq.dense_buffer, store, 3, 1)
            self.assertRaises(DimensionError, sq.dense_buffer, store, 3, -1)
            self.assertRaises(DimensionError, sq.dense_buffer, store, 3, 0, 0, 3)
            self.assertRaises(DimensionError, sq.dense_buffer, store, 3, 0, 1, 1)
            self.assertRaises(DimensionError, sq.dense_buffer, store, 3, 0, 1, 2)
            self.assertRaises(DimensionError, sq.dense_buffer, xp.zeros((3, 3)), 3)

    def test_interleaved_strides(self):
        for sq in self.squareqr:
            xp = sq.namespace
            store = xp.arange(15, dtype=xp.float64)
            buf = sq.dense_buffer(store, 3, 0, 3, 4)
            self.assertEqual(sorted(buf.index(i, j) for i in range(3) for j in range(3)),
                             [0, 3, 4, 6, 7, 8, 10, 11, 14])
            self.assertEqual(buf.get(1, 2), 11.0)
            self.assertRaises(DimensionError, sq.dense_buffer, store, 3, 0, 2, 4)
            self.assertRaises(DimensionError, sq.dense_buffer, store, 3, 0, 4, 2)

    def test_get_set(self):
        for sq, size in product(self.squareqr, self.sizes):
            xp = sq.namespace
            store = xp.asarray([float(i) for i in range(size*size)])
            buf = sq.dense_buffer(store, size)
            for i, j in product(range(size), range(size)):
                self.assertEqual(buf.index(i, j), i + j*size)
                self.assertEqual(buf.get(i, j), float(i + j*size))

            buf.set(size-1, 0, -1.0)
            self.assertEqual(float(store[size-1]), -1.0)

    def test_index_error(self):
        for sq in self.squareqr:
            xp = sq.namespace
            buf = sq.dense_buffer(xp.zeros(4, dtype=xp.float64), 2)
            for i, j in [(2, 0), (0, 2), (-1, 0), (0, -1)]:
                self.assertRaises(IndexError, buf.get, i, j)
                self.assertRaises(IndexError, buf.set, i, j, 1.0)

    def test_submatrix(self):
        for sq in self.squareqr:
            xp = sq.namespace
            # 4x4 column-major block, view on the lower right 2x2 part
            store = xp.asarray([float(i) for i in range(16)])
            buf = sq.dense_buffer(store, 2, 2 + 2*4, 1, 4)
            ref = xp.asarray([[10.0, 14.0], [11.0, 15.0]])
            self.assertEqual(max_error(xp, buf.to_array(), ref), 0.0)
            self.assertEqual(max_error(xp, buf.diagonal(), xp.asarray([10.0, 15.0])), 0.0)

    def test_transposed(self):
        for sq, size in product(self.squareqr, self.sizes):
            xp = sq.namespace
            store = xp.asarray([float(i) for i in range(size*size)])
            buf = sq.dense_buffer(store, size)
            trans = buf.transposed()
            self.assertIs(trans.store, buf.store)
            self.assertEqual(max_error(xp, trans.to_array(), xp.permute_dims(buf.to_array(), (1, 0))), 0.0)

            trans.set(0, size-1, 42.0)
            self.assertEqual(buf.get(size-1, 0), 42.0)

    def test_copy(self):
        for sq, size in product(self.squareqr, self.sizes):
            xp = sq.namespace
            store = xp.asarray([float(i) for i in range(size*size)])
            trans = sq.dense_buffer(store, size).transposed()
            cpy = trans.copy()
            self.assertEqual((cpy.offset, cpy.row_stride, cpy.col_stride), (0, 1, size))
            self.assertEqual(max_error(xp, cpy.to_array(), trans.to_array()), 0.0)

            cpy.set(0, 0, -5.0)
            self.assertEqual(trans.get(0, 0), 0.0)

if __name__ == '__main__':
    unittest.main()
