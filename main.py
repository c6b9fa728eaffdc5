"""主程序入口 - 命令行计算、批量计算和交互式聊天命令模式"""
import argparse
import logging
import sys

import pandas as pd

from config.config import BATCH_CONFIG, BOT_CONFIG, validate_config
from core import evaluate_expression
from bot import CommandHandler, run_session
from utils import evaluate_batch, load_expressions, format_result, strip_whitespace

logger = logging.getLogger(__name__)


def setup_logging(level):
    # 设置日志
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def run_expressions(expressions, strict):
    """计算命令行给出的表达式，返回失败个数"""
    failed = 0
    for expression in expressions:
        result = evaluate_expression(strip_whitespace(expression), strict=strict)
        if result.ok:
            print(f"{expression}={format_result(result.value)}")
        else:
            failed += 1
            print(f"{expression}: {type(result.error).__name__}: {result.error.message}")
    return failed


def run_batch(args):
    expressions = load_expressions(args.file)
    df = evaluate_batch(expressions, strict=args.strict)

    for row in df.itertuples(index=False):
        if pd.isna(row.error):
            print(f"{row.expression}={format_result(row.result)}")
        else:
            print(f"{row.expression}: {row.error_type}: {row.error}")

    if args.save_results:
        logger.info(f"Saving results to {args.output_path}")
        df.to_csv(args.output_path, index=False)

    return int(df['error'].notna().sum())


def run_interactive(args):
    """从标准输入读取聊天消息，只回复以命令前缀开头的消息"""
    handler = CommandHandler(prefix=args.prefix, strict=args.strict)
    logger.info(f"Listening for '{handler.prefix}' commands on stdin")
    for reply in run_session(sys.stdin, handler):
        print(reply, flush=True)
    return 0


def main(args):
    setup_logging(args.log_level)
    validate_config()

    if args.interactive:
        return run_interactive(args)

    if args.file:
        failed = run_batch(args)
    elif args.expressions:
        failed = run_expressions(args.expressions, args.strict)
    else:
        logger.error("No expressions given; use positional expressions, --file or --interactive")
        return 2

    return 1 if failed else 0


def build_parser():
    parser = argparse.ArgumentParser(description="Infix arithmetic calculator")

    parser.add_argument(
        "expressions",
        nargs="*",
        help="Expressions to evaluate, e.g. '2+3*4'"
    )
    parser.add_argument(
        "--file",
        type=str,
        default=None,
        help="Text file with one expression per line"
    )
    parser.add_argument(
        "--save_results",
        action="store_true",
        help="Save batch results to a CSV file"
    )
    parser.add_argument(
        "--output_path",
        type=str,
        default=BATCH_CONFIG["output_path"],
        help="Path to save the batch results"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Reject unbalanced parentheses instead of evaluating best-effort"
    )
    parser.add_argument(
        "--interactive",
        action="store_true",
        help="Read chat messages from stdin and reply to calculator commands"
    )
    parser.add_argument(
        "--prefix",
        type=str,
        default=BOT_CONFIG["command_prefix"],
        help="Command prefix recognised in interactive mode"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default="WARNING",
        help="Logging level (default: WARNING)"
    )
    return parser


def cli():
    args = build_parser().parse_args()
    sys.exit(main(args))


if __name__ == "__main__":
    cli()
