"""
neondb.db.settings
------------------

数据库连接配置：把进程环境（.env / 环境变量）与可选的 YAML 默认值
收敛为一个显式的 DatabaseSettings 对象，再注入 init_database。

优先级：环境变量 > configs/db_local.yaml 中的 database 段 > 代码默认值。
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from dotenv import load_dotenv

from neondb.utils.config_loader import clean_env_value, load_yaml, parse_bool

DEVELOPMENT = "development"
DEFAULT_CONFIG_PATH = Path("configs") / "db_local.yaml"


@dataclass(frozen=True)
class DatabaseSettings:
    """
    数据库客户端初始化所需的全部配置。

    说明：
    - database_url: 连接串，可能为 None（缺失时由初始化过程报错）；
    - app_env: 运行模式，"development" 时改用本地代理地址；
    - verify_tls: 是否校验证书。默认 False 以兼容本地代理的自签名证书，
      生产环境请设置 DATABASE_VERIFY_TLS=true；
    - timeout: 单次 HTTP 请求超时（秒）。
    """

    database_url: Optional[str]
    app_env: str = "production"
    verify_tls: bool = False
    timeout: int = 60

    @property
    def is_development(self) -> bool:
        return self.app_env == DEVELOPMENT


def _yaml_defaults(config_path: Optional[Union[str, Path]]) -> Dict[str, Any]:
    path = Path(config_path) if config_path is not None else DEFAULT_CONFIG_PATH
    data = load_yaml(path, missing_ok=config_path is None)
    section = data.get("database") or {}
    if not isinstance(section, dict):
        raise ValueError(f"{path} 中的 database 段必须是映射类型。")
    return section


def load_settings(
    env: Optional[Mapping[str, str]] = None,
    config_path: Optional[Union[str, Path]] = None,
) -> DatabaseSettings:
    """
    读取环境与 YAML 配置，构造 DatabaseSettings。

    输入：
        env: 环境变量映射；为 None 时先用 python-dotenv 加载 .env（不覆盖已有变量），
             再读取 os.environ。测试时可直接注入字典。
        config_path: YAML 配置路径；为 None 时尝试 configs/db_local.yaml（不存在则忽略），
                     显式传入但不存在时抛 FileNotFoundError。
    输出：
        DatabaseSettings。
    异常：
        ValueError: DATABASE_VERIFY_TLS / DATABASE_TIMEOUT 格式错误。
    """
    if env is None:
        load_dotenv(override=False)
        env = os.environ

    defaults = _yaml_defaults(config_path)

    app_env = clean_env_value(env.get("APP_ENV")) or clean_env_value(env.get("NODE_ENV")) or "production"
    verify_tls = parse_bool(
        clean_env_value(env.get("DATABASE_VERIFY_TLS")),
        default=parse_bool(defaults.get("verify_tls"), default=False),
    )

    raw_timeout = clean_env_value(env.get("DATABASE_TIMEOUT")) or defaults.get("timeout") or 60
    try:
        timeout = int(raw_timeout)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"DATABASE_TIMEOUT 必须为整数秒，当前值：{raw_timeout!r}") from exc

    return DatabaseSettings(
        # 连接串原样传给执行器，仅把空字符串视为缺失
        database_url=env.get("DATABASE_URL") or None,
        app_env=app_env.lower(),
        verify_tls=verify_tls,
        timeout=timeout,
    )
