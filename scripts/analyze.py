#!/usr/bin/env python3
"""
局面分析脚本

Usage:
    python scripts/analyze.py --game go --input board.json
    python scripts/analyze.py --game mahjong --input hand.json --rule Tianjin
    python scripts/analyze.py --game xiangqi --input position.json --output result.json
"""
import argparse
import logging
import sys
from pathlib import Path
import json

# 添加项目根目录到路径
ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(ROOT))

from analysis import AnalysisConfig, MahjongConfig, get_registry

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Board and hand analysis")

    parser.add_argument(
        "--game",
        type=str,
        required=True,
        choices=get_registry().list_games(),
        help="Game to analyze",
    )
    parser.add_argument("--input", type=str, required=True, help="Snapshot JSON file")
    parser.add_argument("--config", type=str, help="Config JSON file")
    parser.add_argument("--rule", type=str, help="Mahjong rule (overrides config)")
    parser.add_argument("--output", type=str, help="Write result JSON to this file")
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (overrides config)",
    )

    return parser.parse_args(argv)


def load_config(args) -> AnalysisConfig:
    """读取配置文件并应用命令行覆盖"""
    config = AnalysisConfig.from_json(args.config) if args.config else AnalysisConfig()
    if args.rule:
        config.mahjong = MahjongConfig(rule=args.rule)
    if args.log_level:
        config.log_level = args.log_level
    return config


def log_summary(game: str, result):
    """记录分析摘要"""
    logger.info("=" * 50)
    logger.info(f"{game} analysis")
    logger.info("=" * 50)

    if game == "go":
        logger.info(f"Groups: {len(result.groups)}")
        logger.info(f"Black: {result.black_stones} stones, {result.black_territory} territory")
        logger.info(f"White: {result.white_stones} stones, {result.white_territory} territory")
        for group in result.groups_in_atari():
            logger.info(f"In atari: {group.color.name.lower()} group at {group.stones[0]}")
    elif game == "guandan":
        logger.info(f"Hand: {' '.join(result.sorted_hand)}")
        logger.info(f"Bombs: {len(result.bombs)}")
        for bomb in result.bombs:
            logger.info(f"  {bomb.bomb_type.value}: {' '.join(bomb.cards)}")
    elif game == "mahjong":
        logger.info(f"Rule: {result.rule.value}")
        logger.info(f"Hand: {' '.join(result.sorted_hand)}")
        if not result.waiting_results:
            logger.info("Not ready")
        for w in result.waiting_results:
            logger.info(f"  {w.tile}: {w.fan} fan ({w.label}), {w.remaining} left")
    elif game == "xiangqi":
        logger.info(f"Best move: {result.best_move}")
        logger.info(f"Reasoning: {result.reasoning}")
    elif game == "poker":
        logger.info(f"Win: {result.win}%")
        logger.info(f"Fold/Call/Raise: {result.fold}/{result.call}/{result.raise_}")

    logger.info("=" * 50)


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(args)
    except (OSError, ValueError) as e:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
        logger.error(f"Failed to load config: {e}")
        return 1

    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )

    try:
        snapshot = json.loads(Path(args.input).read_text(encoding="utf-8"))
        result = get_registry().run(args.game, snapshot, config)
    except (OSError, ValueError) as e:
        logger.error(f"Analysis failed: {e}")
        return 1

    log_summary(args.game, result)

    text = json.dumps(
        result.to_dict(),
        indent=config.output.indent,
        ensure_ascii=config.output.ensure_ascii,
    )
    if args.output:
        Path(args.output).write_text(text, encoding="utf-8")
        logger.info(f"Results saved to {args.output}")
    else:
        print(text)

    return 0


if __name__ == "__main__":
    sys.exit(main())
