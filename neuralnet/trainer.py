'''
Name: DLP Lab1
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import logging
from numbers import Integral

# 進度條函式庫
from tqdm import tqdm

from .errors import InvalidConfigurationError

logger = logging.getLogger(__name__)


class Trainer:
    """
    訓練器類別，負責執行網路的訓練迴圈。
    """
    def __init__(self, network, show_progress=True):
        """
        初始化訓練器。

        參數:
            network: 要訓練的 Network 物件。
            show_progress (bool): 是否顯示 tqdm 進度條。
        """
        self.network = network
        self.show_progress = show_progress

    def train(self, iterations, callback=None):
        """
        執行訓練迴圈：每次迭代先前向傳播，再反向傳播。
        不提前停止，迴圈中也不計算誤差。

        參數:
            iterations (int): 迭代次數，必須大於 0。
            callback (callable, optional): 每完成一次迭代就呼叫 callback(iteration)。

        返回:
            float: 訓練結束後 compute_error() 的結果。
        """
        if isinstance(iterations, bool) or not isinstance(iterations, Integral) or iterations < 1:
            raise InvalidConfigurationError(f"訓練次數必須是正整數，收到 {iterations!r}")
        self.network.check_batch()

        logger.info("Training %s for %d iterations (rate=%s)",
                    self.network.topology(), iterations, self.network.rate)

        for iteration in tqdm(range(iterations), desc="Training Progress",
                              disable=not self.show_progress):
            self.network.feed_forward()
            self.network.feed_backward()

            if callback is not None:
                callback(iteration + 1)

        error = self.network.compute_error()
        print(f"The error rate is {error:.5f}.")
        logger.info("Training finished, mean error %.5f", error)
        return error
