'''
Name: NeuroNet
Topic: back-propagation with momentum
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
import argparse
import numpy as np
from tqdm import tqdm

from neuronet.dataset import GATES, generate_gate
from neuronet.model import Network
from neuronet.loss import SquaredError
from neuronet.optimizer import SGD
from neuronet.trainer import Trainer
from neuronet.export import matrix_to_string
from neuronet.console import interactive_loop
from show_result import show_result, plot_loss_curve


def positive_int(value):
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def build_parser():
    parser = argparse.ArgumentParser(description='NeuroNet: back-propagation with momentum')
    parser.add_argument('--dataset', type=str, default='and', choices=sorted(GATES),
                        help='boolean gate to learn (default: and)')
    parser.add_argument('--layers', type=int, nargs='+', default=[2, 2, 1],
                        help='neurons per layer, input first (default: 2 2 1)')
    parser.add_argument('--epochs', type=int, default=10000, metavar='N',
                        help='maximum number of epochs (default: 10000)')
    parser.add_argument('--speed', type=float, default=0.7, metavar='LR',
                        help='learning rate (default: 0.7)')
    parser.add_argument('--moment', type=float, default=0.3, metavar='M',
                        help='momentum (default: 0.3)')
    parser.add_argument('--tolerance', type=float, default=0.005,
                        help='stop when mean error drops below this (default: 0.005)')
    parser.add_argument('--seed', type=int, default=1, metavar='S',
                        help='random seed (default: 1)')
    parser.add_argument('--log-interval', type=positive_int, default=1000, metavar='N',
                        help='how many epochs to wait before logging training status')
    parser.add_argument('--export', type=str, choices=['long', 'short'], default=None,
                        help='print weights/biases as a chart script array')
    parser.add_argument('--plot', action='store_true', help='plot the error curve')
    parser.add_argument('--interactive', action='store_true',
                        help='read whitespace separated inputs from stdin after training')
    parser.add_argument('--no-progress', action='store_true', help='hide the progress bar')
    return parser


def main(argv=None):
    """
    主函式，負責解析命令列參數、建構網路並執行訓練。
    """
    args = build_parser().parse_args(argv)

    # --- 資料準備 ---
    print(f"使用資料集: {args.dataset.upper()}")
    examples = generate_gate(args.dataset)

    # --- 網路建構 ---
    network = Network(args.layers, rng=np.random.default_rng(args.seed))
    print(f"網路結構: {network.sizes}")

    # --- 訓練 ---
    def report(epoch, error):
        tqdm.write(f"Epoch {epoch}, Error: {error * 100}")

    print(f"\n開始訓練... (Epochs: {args.epochs}, Speed: {args.speed}, Moment: {args.moment})")
    trainer = Trainer(network, SquaredError(), SGD(learning_rate=args.speed, momentum=args.moment))
    result = trainer.train(examples, args.epochs, log_interval=args.log_interval,
                           tolerance=args.tolerance, on_progress=report,
                           show_progress=not args.no_progress)
    print(f"Trained for: {result.final_epoch} epochs")

    # --- 結果顯示 ---
    show_result(network, examples)
    if args.export:
        print(matrix_to_string(network, args.export == 'long'), end='')
    if args.plot:
        plot_loss_curve(result.loss_history)
    if args.interactive:
        interactive_loop(network)
    return result


if __name__ == '__main__':
    main()
