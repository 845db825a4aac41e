# -*- coding: utf-8 -*-
"""
主入口模块
"""

import argparse
import asyncio
import signal
import sys

from . import __version__
from .core.config import BACKENDS, Config, EngineConfig
from .core.result_manager import ResultManager
from .core.scanner import SubdomainScanner
from .errors import SubenumError
from .output import exporter_for
from .utils.helpers import load_wordlist
from .utils.logger import get_logger, set_debug

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_CONFIG_ERROR = 2
EXIT_INTERRUPTED = 130


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='subenum', description='异步 DNS 子域名枚举工具（按 QPS 限速）')
    parser.add_argument('-s', '--subdomains', help='子域名字典文件路径')
    parser.add_argument('-t', '--target', help='要枚举的目标域名')
    parser.add_argument('-n', '--ns', help='使用的 DNS 服务器 (例如: 1.1.1.1:53)，默认使用系统配置')
    parser.add_argument('-q', '--qps', type=float, help='每秒查询数 (默认: 10)')
    parser.add_argument('-T', '--timeout', type=float, help='单次查询超时时间 (秒，默认: 5)')
    parser.add_argument('-b', '--burst', type=float, help='令牌桶容量，可吸收的突发查询数 (默认: 等于 QPS)')
    parser.add_argument('-c', '--concurrency', type=int, help='在途查询数上限 (默认根据 QPS 与超时自动计算)')
    parser.add_argument('--backend', choices=BACKENDS, help='解析后端 (默认: dnspython)')
    parser.add_argument('--config', help='YAML 配置文件路径')
    parser.add_argument('-o', '--output', help='输出文件路径 (.json 或 .csv)')
    parser.add_argument('--resolved-only', action='store_true', help='只输出解析成功的子域名')
    parser.add_argument('-d', '--debug', action='store_true', help='输出调试信息')
    parser.add_argument('-V', '--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def _print_outcome(outcome, resolved_only=False):
    if resolved_only and not outcome.is_resolved:
        return
    line = f"{outcome.name} {outcome.kind}"
    if outcome.records:
        line = f"{line} {','.join(outcome.records)}"
    print(line, flush=True)


def _print_summary(stats, results: ResultManager):
    """打印扫描摘要（stderr，不影响结果输出）"""
    err = sys.stderr
    print("\n=== 扫描完成 ===", file=err)
    print(f"目标: {stats['target']}", file=err)
    print(f"扫描时长: {stats['duration']:.2f} 秒", file=err)
    print(f"发起查询数: {stats['admitted']}", file=err)
    if stats['skipped']:
        print(f"跳过的超长候选: {stats['skipped']}", file=err)
    for kind, count in results.summary().items():
        if count:
            print(f"  {kind}: {count} 个", file=err)
    print(f"实际速率: {stats['queries_per_second']:.2f} 查询/秒", file=err)


def _register_signal_handlers(scanner: SubdomainScanner):
    """注册信号处理程序，返回已注册的信号"""
    registered = []
    if sys.platform == 'win32':  # Windows 下由 KeyboardInterrupt 处理
        return registered
    loop = asyncio.get_running_loop()

    def _handle_signal(signum):
        if not scanner.should_stop:
            print("\n收到终止信号，正在停止扫描...", file=sys.stderr)
        scanner.stop()

    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, _handle_signal, sig)
            registered.append(sig)
        except (NotImplementedError, RuntimeError) as e:
            # 在某些环境中可能无法注册信号处理程序
            logger.debug(f"无法注册信号 {sig}: {e}")
    return registered


def _remove_signal_handlers(signals):
    loop = asyncio.get_running_loop()
    for sig in signals:
        loop.remove_signal_handler(sig)


async def main(args) -> int:
    """主函数：配置与字典错误在发起任何查询之前抛出"""
    config = EngineConfig.from_sources(args, Config(args.config))
    words = load_wordlist(config.wordlist)
    logger.debug(f"从 {config.wordlist} 加载了 {len(words)} 个条目")

    scanner = SubdomainScanner(config)
    results = ResultManager()
    signals = _register_signal_handlers(scanner)
    try:
        async for outcome in scanner.scan(words):
            results.add(outcome)
            _print_outcome(outcome, args.resolved_only)
    finally:
        _remove_signal_handlers(signals)

    if args.output:
        items = results.get_resolved() if args.resolved_only else results.get_all()
        exporter_for(args.output).export(items, args.output)
        print(f"结果已保存到: {args.output}", file=sys.stderr)

    _print_summary(scanner.get_stats(), results)
    return EXIT_INTERRUPTED if scanner.should_stop else EXIT_OK


def run(argv=None) -> int:
    """运行函数，处理Windows平台的兼容性"""
    args = build_parser().parse_args(argv)
    set_debug(args.debug)

    # 在Windows平台上，aiodns 需要 selector 事件循环
    if sys.platform == 'win32':
        asyncio.set_event_loop_policy(asyncio.WindowsSelectorEventLoopPolicy())

    try:
        return asyncio.run(main(args))
    except SubenumError as e:
        print(f"错误: {e}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except KeyboardInterrupt:
        print("\n程序被用户中断", file=sys.stderr)
        return EXIT_INTERRUPTED


if __name__ == '__main__':
    sys.exit(run())
