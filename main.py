'''
Name: DLP Lab1
Topic: back-propagation
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import argparse
import logging
import numpy as np

from dataset import generate_XOR, generate_XOR_easy, generate_linear, plot_data
from neuralnet import Network, Trainer, NetworkError, setup_logging
from show_result import show_result, print_predictions

DATASETS = {
    'xor': generate_XOR,
    'xor-easy': generate_XOR_easy,
    'linear': generate_linear,
}


def build_parser():
    parser = argparse.ArgumentParser(description='Lab1: Back-propagation')
    parser.add_argument('--dataset', type=str, default='xor', choices=list(DATASETS),
                        help='dataset to use (default: xor)')
    parser.add_argument('--epochs', type=int, default=10000, metavar='N',
                        help='number of training iterations (default: 10000)')
    parser.add_argument('--lr', type=float, default=0.5, metavar='LR',
                        help='learning rate (default: 0.5)')
    parser.add_argument('--hidden-dims', type=int, nargs='*', default=[2],
                        help='dimensions of hidden layers, may be empty (default: 2)')
    parser.add_argument('--seed', type=int, default=1, metavar='S',
                        help='random seed (default: 1)')
    parser.add_argument('--plot', action='store_true',
                        help='show the dataset and prediction figures')
    parser.add_argument('--no-progress', action='store_true',
                        help='hide the progress bar')
    parser.add_argument('--log-dir', type=str, default=None,
                        help='also write the log to this directory')
    parser.add_argument('--verbose', action='store_true',
                        help='enable debug logging')
    return parser


def main(argv=None):
    """
    主函式，負責解析命令列參數、建構網路並執行訓練。

    返回:
        float: 訓練後的平均誤差。
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging("train", logging.DEBUG if args.verbose else logging.WARNING, args.log_dir)
    np.random.seed(args.seed)

    # --- 資料準備 ---
    print(f"使用資料集: {args.dataset.upper()}")
    X, y = DATASETS[args.dataset]()
    if args.plot:
        plot_data(X, y, title=f"Original {args.dataset.upper()} Data")

    # --- 網路建構與訓練 ---
    try:
        network = Network(args.lr, X, y, *args.hidden_dims)
        print(f"網路結構: {network.topology()}")

        trainer = Trainer(network, show_progress=not args.no_progress)
        print(f"\n開始訓練... (Epochs: {args.epochs}, LR: {args.lr})")
        error = trainer.train(args.epochs)
    except NetworkError as e:
        parser.error(str(e))

    # --- 結果顯示 ---
    print_predictions(network, y)
    show_result(network, X, y, plot=args.plot)
    return error


if __name__ == '__main__':
    main()
