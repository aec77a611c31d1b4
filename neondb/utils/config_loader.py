"""
neondb.utils.config_loader: 配置文件读取（YAML）与环境变量取值辅助。

禁止引用 neondb.db 下的任何内容。
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def load_yaml(path: Union[str, Path], missing_ok: bool = False) -> Dict[str, Any]:
    """
    读取 YAML 文件并返回字典。

    输入：
    - path: 文件路径，可为 str 或 Path；
    - missing_ok: 为 True 时文件不存在返回空字典，而不是抛异常。

    输出：
    - 解析得到的字典；若文件为空或顶层不是映射，返回空字典。

    异常：
    - FileNotFoundError: 路径不存在且 missing_ok 为 False；
    - yaml.YAMLError: 解析失败时由 PyYAML 抛出。
    """
    path = Path(path)
    if not path.exists():
        if missing_ok:
            return {}
        raise FileNotFoundError(f"YAML 文件不存在：{path}")
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data if isinstance(data, dict) else {}


def parse_bool(value: Any, default: bool = False) -> bool:
    """
    将环境变量/YAML 中的开关值解析为 bool。

    None 或空字符串返回 default；无法识别的字符串抛 ValueError。
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if not text:
        return default
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"无法识别的布尔配置值：{value!r}（可用 true/false/1/0/yes/no）")


def clean_env_value(value: Optional[str]) -> Optional[str]:
    """去掉首尾空白及成对引号；空值返回 None。"""
    if value is None:
        return None
    s = value.strip()
    if len(s) >= 2 and s[0] == s[-1] and s[0] in ("'", '"'):
        s = s[1:-1].strip()
    return s or None
