"""
分析配置

配置只在调用层 (命令行、注册表) 使用，分析函数本身只接收显式参数
"""
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Union
import json

from core.stones import DEFAULT_BOARD_SIZE

from .mahjong import MahjongRule, parse_rule

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _section(d: Dict[str, Any], name: str) -> Dict[str, Any]:
    """取出配置小节，缺省或 null 视为空"""
    section = d.get(name)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise ValueError(f"Config section '{name}' must be an object, got {type(section).__name__}")
    return section


@dataclass
class GoConfig:
    """
    围棋配置

    Attributes:
        board_size: 快照缺少棋盘时使用的棋盘边长
    """
    board_size: int = DEFAULT_BOARD_SIZE

    def __post_init__(self):
        if isinstance(self.board_size, bool) or not isinstance(self.board_size, int) or self.board_size < 1:
            raise ValueError(f"go.board_size must be a positive integer, got {self.board_size!r}")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'GoConfig':
        valid_keys = cls.__dataclass_fields__.keys()
        filtered = {k: v for k, v in d.items() if k in valid_keys}
        return cls(**filtered)


@dataclass
class MahjongConfig:
    """
    麻将配置

    Attributes:
        rule: 快照未指定规则时的默认计番规则
    """
    rule: MahjongRule = MahjongRule.NATIONAL

    def __post_init__(self):
        self.rule = parse_rule(self.rule)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'MahjongConfig':
        valid_keys = cls.__dataclass_fields__.keys()
        filtered = {k: v for k, v in d.items() if k in valid_keys}
        return cls(**filtered)


@dataclass
class OutputConfig:
    """JSON 输出配置"""
    indent: int = 2
    ensure_ascii: bool = False

    def __post_init__(self):
        if isinstance(self.indent, bool) or not isinstance(self.indent, int) or self.indent < 0:
            raise ValueError(f"output.indent must be a non-negative integer, got {self.indent!r}")
        if not isinstance(self.ensure_ascii, bool):
            raise ValueError(f"output.ensure_ascii must be a boolean, got {self.ensure_ascii!r}")

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'OutputConfig':
        valid_keys = cls.__dataclass_fields__.keys()
        filtered = {k: v for k, v in d.items() if k in valid_keys}
        return cls(**filtered)


@dataclass
class AnalysisConfig:
    """
    总配置

    Attributes:
        go: 围棋配置
        mahjong: 麻将配置
        output: 输出配置
        log_level: 日志级别
    """
    go: GoConfig = field(default_factory=GoConfig)
    mahjong: MahjongConfig = field(default_factory=MahjongConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    log_level: str = "INFO"

    def __post_init__(self):
        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")
        self.log_level = self.log_level.upper()

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> 'AnalysisConfig':
        """
        从字典创建配置，未知键被忽略

        Raises:
            ValueError: 小节或字段类型不对
        """
        if not isinstance(d, dict):
            raise ValueError(f"Config must be a JSON object, got {type(d).__name__}")
        return cls(
            go=GoConfig.from_dict(_section(d, "go")),
            mahjong=MahjongConfig.from_dict(_section(d, "mahjong")),
            output=OutputConfig.from_dict(_section(d, "output")),
            log_level=d.get("log_level", "INFO"),
        )

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> 'AnalysisConfig':
        return cls.from_dict(json.loads(Path(path).read_text(encoding="utf-8")))

    def to_dict(self) -> Dict[str, Any]:
        """转换为字典"""
        return {
            "go": {"board_size": self.go.board_size},
            "mahjong": {"rule": self.mahjong.rule.value},
            "output": {
                "indent": self.output.indent,
                "ensure_ascii": self.output.ensure_ascii,
            },
            "log_level": self.log_level,
        }
