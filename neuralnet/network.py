'''
Name: DLP Lab1
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import logging
from numbers import Integral, Real

from .errors import InvalidConfigurationError, ShapeMismatchError
from .matrix import (
    to_matrix, create_matrix, random_matrix, rows, columns,
    dot_product, transpose, matrix_sum, difference, multiplication,
    apply_function, apply_rate, sigmoid, subtract_from_one, multiply_by_two,
)

logger = logging.getLogger(__name__)


class Network:
    """
    全連接前饋神經網路，所有層都使用 Sigmoid 活化函數。

    layers[0] 為輸入層，layers[-1] 為輸出層；
    weights[i] 與 biases[i] 連接 layers[i] 與 layers[i+1]。
    三個列表在建構時就決定長度，之後只會替換元素，不會增減。
    """
    def __init__(self, rate, inputs, outputs, *hidden_nodes):
        """
        建構網路並隨機初始化權重與偏置。

        參數:
            rate (float): 學習率，必須大於 0。
            inputs: 訓練資料，形狀 (樣本數, 特徵數)。
            outputs: 訓練標籤，形狀 (樣本數, 輸出節點數)。
            *hidden_nodes (int): 每個隱藏層的節點數，可以不給 (單層感知器)。
        """
        if isinstance(rate, bool) or not isinstance(rate, Real) or not rate > 0:
            raise InvalidConfigurationError(f"學習率必須大於 0，收到 {rate!r}")
        for nodes in hidden_nodes:
            if isinstance(nodes, bool) or not isinstance(nodes, Integral) or nodes < 1:
                raise InvalidConfigurationError(f"隱藏層節點數必須是正整數，收到 {nodes!r}")

        inputs = to_matrix(inputs)
        outputs = to_matrix(outputs)
        if rows(inputs) != rows(outputs):
            raise ShapeMismatchError(
                f"輸入與輸出的樣本數不同: {rows(inputs)} vs {rows(outputs)}"
            )

        batch_size = rows(inputs)
        layers = [inputs]
        for nodes in hidden_nodes:
            layers.append(create_matrix(batch_size, int(nodes)))
        # 輸出層只用來決定形狀，第一次 feed_forward 就會被覆寫
        layers.append(outputs.copy())

        weights = []
        biases = []
        for i in range(len(layers) - 1):
            weights.append(random_matrix(columns(layers[i]), columns(layers[i + 1])))
            biases.append(random_matrix(rows(layers[i]), columns(layers[i + 1])))

        self.layers = layers
        self.weights = weights
        self.biases = biases
        self.input = inputs
        self.output = outputs
        self.output.flags.writeable = False
        self.rate = float(rate)

        logger.debug(
            "Network created: topology=%s, batch=%d, rate=%s",
            [columns(layer) for layer in layers], batch_size, self.rate,
        )

    @property
    def batch_size(self):
        """目前輸入層的樣本數 (predict 之後會變成 1)。"""
        return rows(self.layers[0])

    def topology(self):
        """每一層的節點數，例如 [2, 2, 1]。"""
        return [columns(layer) for layer in self.layers]

    def load_input(self, inputs):
        """
        替換輸入層。

        欄數必須與原本的輸入相同；列數不可超過訓練時的樣本數，
        因為每一列樣本都有自己的一列偏置。
        """
        inputs = to_matrix(inputs)
        if columns(inputs) != columns(self.layers[0]):
            raise ShapeMismatchError(
                f"輸入需要 {columns(self.layers[0])} 個特徵，收到 {columns(inputs)}"
            )
        if rows(inputs) > rows(self.biases[0]):
            raise ShapeMismatchError(
                f"輸入最多 {rows(self.biases[0])} 列，收到 {rows(inputs)}"
            )
        self.layers[0] = inputs

    def check_batch(self):
        """
        確認輸入層的樣本數與標籤相同，否則無法訓練或計算誤差。
        predict 之後需先呼叫 load_input(network.input)。
        """
        if self.batch_size != rows(self.output):
            raise ShapeMismatchError(
                f"目前輸入有 {self.batch_size} 列，但標籤有 {rows(self.output)} 列；"
                "請先呼叫 load_input(network.input)"
            )

    def feed_forward(self):
        """
        執行前向傳播：layers[i+1] = sigmoid(layers[i] · W[i] + b[i])。
        """
        for i in range(len(self.layers) - 1):
            layer = self.layers[i]
            # 輸入少於訓練樣本數時 (例如 predict)，只取前幾列偏置
            biases = self.biases[i][:rows(layer)]

            product = matrix_sum(dot_product(layer, self.weights[i]), biases)
            self.layers[i + 1] = apply_function(product, sigmoid)

    def predict(self, inputs):
        """
        對單筆資料進行預測。

        注意：這會把輸入層換成這一筆資料 (batch 變成 1)，
        之後若要繼續訓練，需先呼叫 load_input(network.input)。

        每一列訓練樣本都有自己的一列偏置，而 predict 一律使用第 0 列偏置。
        因此對第 1 筆以後的訓練資料，predict 的結果通常不等於
        訓練時 layers[-1] 對應那一列的輸出。

        參數:
            inputs (sequence of float): 一筆資料的特徵。

        返回:
            np.array: 輸出層的值，形狀 (輸出節點數,)。
        """
        row = to_matrix(inputs)
        if rows(row) != 1 or columns(row) != columns(self.input):
            raise ShapeMismatchError(
                f"predict 需要長度為 {columns(self.input)} 的一維向量，收到形狀 {row.shape}"
            )
        self.load_input(row)
        self.feed_forward()
        return self.layers[-1][0].copy()

    def feed_backward(self):
        """
        執行反向傳播，以梯度下降更新所有權重與偏置。

        所有 delta 與 adjustment 都在同一份 layers 快照上算完，
        才開始更新 weights / biases。
        """
        self.check_batch()

        transitions = len(self.weights)
        deltas = [None] * transitions
        adjustments = [None] * transitions

        # 輸出層: delta = 2(y - ŷ) ⊙ ŷ(1 - ŷ)
        last = self.layers[-1]
        error = difference(self.output, last)
        sigmoid_derivative = multiplication(last, apply_function(last, subtract_from_one))
        delta = multiplication(apply_function(error, multiply_by_two), sigmoid_derivative)
        deltas[-1] = delta
        adjustments[-1] = dot_product(transpose(self.layers[-2]), delta)

        # 隱藏層，由後往前
        for t in range(transitions - 2, -1, -1):
            layer = self.layers[t + 1]
            sigmoid_derivative = multiplication(layer, apply_function(layer, subtract_from_one))
            delta = multiplication(
                dot_product(deltas[t + 1], transpose(self.weights[t + 1])),
                sigmoid_derivative,
            )
            deltas[t] = delta
            adjustments[t] = dot_product(transpose(self.layers[t]), delta)

        for t in range(transitions):
            self.weights[t] = matrix_sum(self.weights[t], apply_rate(adjustments[t], self.rate))
            self.biases[t] = matrix_sum(self.biases[t], apply_rate(deltas[t], self.rate))

    def compute_error(self):
        """
        回傳輸出層與標籤差值 (output - prediction) 的平均。

        這是有正負號的平均，正負誤差會互相抵銷，只作為訓練後的粗略指標。
        """
        self.check_batch()
        self.feed_forward()
        errors = difference(self.output, self.layers[-1])
        return float(errors.sum() / errors.size)


def create_network(rate, inputs, outputs, *hidden_nodes):
    """建立網路，等同於 Network(rate, inputs, outputs, *hidden_nodes)。"""
    return Network(rate, inputs, outputs, *hidden_nodes)
