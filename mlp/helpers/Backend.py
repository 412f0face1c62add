# mlp/helpers/Backend.py
import numpy as np

VERBOSE_STARTUP = False  # set True to print device information on startup

try:
    import cupy as cp
    if VERBOSE_STARTUP:
        print("CuPy:", cp.__version__)
        print("GPU count:", cp.cuda.runtime.getDeviceCount())
        print("=================================================")
    # Quick runtime check
    try:
        _ = (cp.array([1, 2, 3]) + 1).sum()
        CUPY_AVAILABLE = True
    except Exception as e:
        if VERBOSE_STARTUP:
            print(f"CuPy installed but CUDA runtime error: {e}")
            print("Falling back to CPU (NumPy)")
        cp = None
        CUPY_AVAILABLE = False
except ImportError:
    cp = None
    CUPY_AVAILABLE = False
    if VERBOSE_STARTUP:
        print("CuPy not available - using NumPy (CPU)")


class ShapeMismatchError(ValueError):
    """Raised when a matrix operation receives operands of incompatible shapes."""

    def __init__(self, op, *shapes):
        self.op = op
        self.shapes = shapes
        shown = " and ".join(str(tuple(s)) for s in shapes)
        super().__init__(f"{op}: incompatible shapes {shown}")


class Backend:
    """
    Matrix algebra used by the layers and the network.

    Every operation works on 2-D arrays of the current backend (NumPy, or CuPy
    when requested and available) and checks its shape precondition before
    computing, raising ShapeMismatchError instead of broadcasting.
    """
    def __init__(self, use_gpu=False, default_float=np.float64):
        self.use_gpu = bool(use_gpu and CUPY_AVAILABLE)
        self.default_float = default_float
        self.xp = cp if self.use_gpu else np
        if VERBOSE_STARTUP:
            print("Using GPU backend (CuPy)" if self.use_gpu else "Using CPU backend (NumPy)")

    # -------- device transfer --------
    def to_cpu(self, x):
        """Move array to CPU (NumPy)."""
        if self.use_gpu and x is not None and not isinstance(x, np.ndarray):
            return cp.asnumpy(x)
        return x

    def ensure_array(self, x, dtype=None):
        """
        Ensure 'x' is a floating array of the current backend.
        Accepts list/tuple/np/cp arrays; returns xp.ndarray.
        """
        dtype = dtype or self.default_float
        if self.use_gpu:
            arr = cp.asarray(x)
        elif cp is not None and isinstance(x, cp.ndarray):
            arr = cp.asnumpy(x)
        else:
            arr = np.asarray(x)
        if arr.dtype != dtype:
            arr = arr.astype(dtype)
        return arr

    # -------- construction / inspection --------
    def matrix(self, rows, cols, values=None):
        """
        Build a rows x cols matrix from a flat row-major sequence of values.
        With no values the matrix is zero-filled.
        """
        if values is None:
            return self.xp.zeros((rows, cols), dtype=self.default_float)
        arr = self.ensure_array(values).ravel()
        if arr.size != rows * cols:
            raise ShapeMismatchError("matrix", (rows, cols), arr.shape)
        return arr.reshape(rows, cols)

    def dims(self, x):
        """Return (rows, cols) of a 2-D matrix."""
        self._require_2d("dims", x)
        return int(x.shape[0]), int(x.shape[1])

    def row(self, x, i):
        """Extract row i as a standalone 1 x cols matrix."""
        rows, _ = self.dims(x)
        if not 0 <= i < rows:
            raise IndexError(f"row {i} out of range for matrix with {rows} rows")
        return self.ensure_array(x[i:i + 1, :]).copy()

    # -------- matrix algebra --------
    def multiply(self, a, b):
        """Matrix product a . b; requires cols(a) == rows(b)."""
        self._require_2d("multiply", a, b)
        if a.shape[1] != b.shape[0]:
            raise ShapeMismatchError("multiply", a.shape, b.shape)
        return self.xp.matmul(a, b)

    def add(self, a, b):
        self._require_same_shape("add", a, b)
        return a + b

    def subtract(self, a, b):
        self._require_same_shape("subtract", a, b)
        return a - b

    def multiply_elems(self, a, b):
        """Element-wise (Hadamard) product."""
        self._require_same_shape("multiply_elems", a, b)
        return a * b

    def scale(self, s, x):
        self._require_2d("scale", x)
        return s * x

    def transpose(self, x):
        self._require_2d("transpose", x)
        return self.xp.transpose(x)

    def map(self, fn, x):
        """Apply a vectorised element-wise function; the shape must be preserved."""
        self._require_2d("map", x)
        out = self.ensure_array(fn(x))
        if out.shape != x.shape:
            raise ShapeMismatchError("map", x.shape, out.shape)
        return out

    # -------- display --------
    def concat(self, a, b):
        """
        Stack b below a for display. Narrower rows are padded with NaN so
        matrices with different column counts can be shown together.
        """
        if a is None:
            self._require_2d("concat", b)
            return self.ensure_array(b).copy()
        self._require_2d("concat", a, b)
        cols = max(a.shape[1], b.shape[1])
        return self.xp.vstack([self._pad_cols(a, cols), self._pad_cols(b, cols)])

    def format(self, x, precision=4):
        return np.array2string(
            np.asarray(self.to_cpu(x)), precision=precision, suppress_small=True
        )

    def print(self, x, precision=4):
        print(self.format(x, precision=precision))

    # -------- randomness --------
    def seed(self, seed=42):
        """Seed RNG for reproducibility."""
        if self.use_gpu:
            cp.random.seed(seed)
        np.random.seed(seed)  # weights are drawn on the CPU

    # -------- shape checks --------
    def _require_2d(self, op, *arrays):
        for x in arrays:
            if getattr(x, "ndim", None) != 2:
                raise ShapeMismatchError(op, getattr(x, "shape", ()))

    def _require_same_shape(self, op, a, b):
        self._require_2d(op, a, b)
        if a.shape != b.shape:
            raise ShapeMismatchError(op, a.shape, b.shape)

    def _pad_cols(self, x, cols):
        if x.shape[1] == cols:
            return x
        pad = self.xp.full((x.shape[0], cols - x.shape[1]), np.nan, dtype=x.dtype)
        return self.xp.hstack([x, pad])

    # -------- delegate unknown attrs to xp --------
    def __getattr__(self, name):
        if name == "xp":
            raise AttributeError(name)
        return getattr(self.xp, name)


# Global backend instance - can be overridden per network
backend = Backend(use_gpu=False)
