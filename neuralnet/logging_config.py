'''
Name: DLP Lab1
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
from datetime import datetime
import logging
import os
import sys


def setup_logging(run_name="train", level=logging.INFO, log_dir=None):
    """
    設定 root logger：輸出到 console，若有給 log_dir 也寫入檔案。

    參數:
        run_name (str): 日誌檔名前綴，例如 'train'。
        level (int): 日誌等級，例如 logging.INFO。
        log_dir (str, optional): 日誌資料夾，檔名為 <run_name>_<時間戳>.log。

    返回:
        str or None: 日誌檔路徑 (沒有寫檔時為 None)。
    """
    root_logger = logging.getLogger()
    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(name)s - %(message)s"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_filename = None
    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
        log_filename = os.path.join(log_dir, f"{run_name}_{timestamp}.log")

        file_handler = logging.FileHandler(log_filename, mode="w")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)
    return log_filename
