#!/usr/bin/env python3
"""
html2rss 主入口
从HTML文件或网页提取内容，生成RSS条目并插入 rss.xml
"""

import argparse
import logging
import sys
from pathlib import Path

from html2rss.exceptions import HtmlToRssError
from html2rss.generators.item_generator import ItemConfig, ItemGenerator, load_config

# 配置日志
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """创建命令行参数解析器"""
    parser = argparse.ArgumentParser(
        prog='html2rss',
        description='HTMLtoRSS - 把HTML页面内容作为条目加入RSS文件'
    )
    parser.add_argument(
        '-f', '--html',
        required=True,
        help='HTML文件的相对路径或网页URL'
    )
    parser.add_argument(
        '-r', '--rss',
        default=None,
        help='rss.xml 文件的相对路径'
    )
    parser.add_argument(
        '-b', '--parent-url',
        dest='base_url',
        default=None,
        help='用于转换相对 src 等地址的上级URL'
    )
    parser.add_argument(
        '-s', '--selector',
        default=None,
        help='内容的CSS选择器 (默认: main)'
    )
    parser.add_argument(
        '-t', '--title',
        default=None,
        help='条目标题 (默认使用第一个 <h1> 的文本)'
    )
    parser.add_argument(
        '-d', '--date-time',
        default=None,
        help="条目时间，例如 '2021-06-02 14:30' (默认: now)"
    )
    parser.add_argument(
        '-c', '--lines-to-cut',
        type=int,
        default=None,
        help='从内容开头删除的行数 (默认: 0)'
    )
    parser.add_argument(
        '--dry-run',
        action='store_true',
        help='只在终端显示结果，不写入RSS文件'
    )
    parser.add_argument(
        '--config',
        default=None,
        help='YAML 配置文件路径'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='显示详细日志'
    )
    return parser


def main(argv=None) -> int:
    """主函数"""
    parser = build_parser()
    args = parser.parse_args(argv)

    # 设置日志级别
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    settings = {}
    if args.config:
        config_path = Path(args.config)
        try:
            settings.update(load_config(str(config_path)))
        except HtmlToRssError as e:
            logger.error(str(e))
            return 1

    # 命令行参数覆盖配置文件
    overrides = {
        'html': args.html,
        'rss': args.rss,
        'base_url': args.base_url,
        'selector': args.selector,
        'title': args.title,
        'date_time': args.date_time,
        'lines_to_cut': args.lines_to_cut,
    }
    settings.update({key: value for key, value in overrides.items() if value is not None})
    settings['dry_run'] = args.dry_run or bool(settings.get('dry_run', False))

    for key, flag in (('rss', '--rss'), ('base_url', '--parent-url')):
        if not settings.get(key):
            parser.error(f"缺少参数 {flag}（命令行或配置文件中必须提供）")

    config = ItemConfig.from_dict(settings)

    try:
        item = ItemGenerator(config).generate()
    except HtmlToRssError as e:
        logger.error(f"生成RSS条目失败: {e}")
        return 1

    if not config.dry_run:
        print(f"RSS item successfully added to {config.rss}")
    logger.debug(f"guid: {item.guid}")
    return 0


def run():
    """命令行脚本入口"""
    sys.exit(main())


if __name__ == '__main__':
    run()
