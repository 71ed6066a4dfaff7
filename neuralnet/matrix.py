'''
Name: DLP Lab1
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''

'''
Matrix algebra
create / random / dot / transpose
sum / difference / multiplication (elementwise)
apply_function / apply_rate
'''
import numpy as np

from .errors import ShapeMismatchError


def to_matrix(data):
    """
    將巢狀串列或 numpy 陣列轉成 2-D float 矩陣。
    一維輸入會被視為單一列。
    """
    try:
        matrix = np.array(data, dtype=float)
    except ValueError as e:
        # 通常是每一列長度不同
        raise ShapeMismatchError(f"無法轉換成矩陣 (每一列的欄數必須相同): {e}") from e
    if matrix.ndim == 1:
        matrix = matrix.reshape(1, -1)
    if matrix.ndim != 2 or matrix.shape[0] < 1 or matrix.shape[1] < 1:
        raise ShapeMismatchError(f"需要至少 1x1 的二維矩陣，收到形狀 {matrix.shape}")
    return matrix


def _check_dims(rows, columns):
    if rows < 1 or columns < 1:
        raise ShapeMismatchError(f"矩陣大小必須至少為 1x1，收到 {rows}x{columns}")


def create_matrix(rows, columns):
    """建立全為 0 的矩陣。"""
    _check_dims(rows, columns)
    return np.zeros((rows, columns))


def random_matrix(rows, columns):
    """
    建立隨機矩陣，數值均勻分布於 [-1, 1)。
    使用 numpy 的全域亂數產生器，可透過 np.random.seed 重現。
    """
    _check_dims(rows, columns)
    return np.random.uniform(-1.0, 1.0, size=(rows, columns))


def rows(matrix):
    return matrix.shape[0]


def columns(matrix):
    return matrix.shape[1]


def dot_product(a, b):
    """
    矩陣乘法，結果形狀為 rows(a) x columns(b)。
    """
    if columns(a) != rows(b):
        raise ShapeMismatchError(
            f"dot: 無法相乘 {a.shape} 與 {b.shape} (columns(a) != rows(b))"
        )
    return np.dot(a, b)


def transpose(matrix):
    return matrix.T.copy()


def _check_same_shape(a, b, name):
    if a.shape != b.shape:
        raise ShapeMismatchError(f"{name}: 形狀不同 {a.shape} vs {b.shape}")


def matrix_sum(a, b):
    _check_same_shape(a, b, "sum")
    return a + b


def difference(a, b):
    _check_same_shape(a, b, "difference")
    return a - b


def multiplication(a, b):
    """逐元素相乘 (Hadamard product)。"""
    _check_same_shape(a, b, "multiplication")
    return a * b


def apply_function(matrix, function):
    """
    對矩陣每個元素套用函數，回傳同形狀的新矩陣。
    function 必須能直接作用在 numpy 陣列上（例如 sigmoid）。
    """
    result = np.asarray(function(matrix), dtype=float)
    if result.shape != matrix.shape:
        raise ShapeMismatchError(
            f"apply_function: 函數改變了矩陣形狀 {matrix.shape} -> {result.shape}"
        )
    return result


def apply_rate(matrix, rate):
    """乘上純量 (學習率)。"""
    return matrix * rate


# --- 逐點函數 ---

def sigmoid(x):
    return 1 / (1 + np.exp(-x))


def subtract_from_one(x):
    return 1 - x


def multiply_by_two(x):
    return 2 * x
