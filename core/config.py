"""
配置管理系统

支持:
1. 环境变量读取
2. .env 文件
3. 类型验证
4. 敏感信息脱敏
"""
from functools import lru_cache
from typing import Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class MoiraApiSettings(BaseSettings):
    """Moira API 配置"""
    model_config = SettingsConfigDict(
        env_prefix="MOIRA_",
        extra="ignore"
    )

    base_url: str = Field(default="http://localhost:8080", description="Moira 服务地址")
    api_prefix: str = Field(default="/api", description="API 路径前缀")
    timeout: float = Field(default=30.0, gt=0, description="请求超时（秒）")
    max_retries: int = Field(default=3, ge=0, le=10, description="连接重试次数")
    events_page_size: int = Field(default=100, ge=1, le=1000, description="事件历史每页条数")
    login: Optional[str] = Field(default=None, description="X-Webauth-User 登录名")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


class LoggingSettings(BaseSettings):
    """日志配置"""
    model_config = SettingsConfigDict(
        env_prefix="LOG_",
        extra="ignore"
    )

    level: str = Field(default="INFO", description="日志级别")
    format: str = Field(default="json", description="日志格式: json, console")
    file_path: Optional[str] = Field(default=None, description="日志文件路径")
    max_size_mb: int = Field(default=100, ge=1, le=1000, description="日志文件最大大小 (MB)")
    backup_count: int = Field(default=7, ge=1, le=30, description="保留日志文件数")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v = v.upper()
        if v not in allowed:
            raise ValueError(f"日志级别必须是 {allowed} 之一")
        return v


class Settings(BaseSettings):
    """
    主配置类

    层级:
    1. 环境变量 (最高优先级)
    2. .env 文件
    3. 默认值 (最低优先级)

    使用示例:
    >>> settings = Settings()
    >>> print(settings.moira.base_url)
    """
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # 应用基础配置
    app_name: str = Field(default="MoiraTriggerView", description="应用名称")
    app_version: str = Field(default="0.1.0", description="应用版本")
    debug: bool = Field(default=False, description="调试模式")
    environment: str = Field(default="development", description="运行环境: development, staging, production")

    # 子配置
    moira: MoiraApiSettings = Field(default_factory=MoiraApiSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        allowed = {"development", "staging", "production"}
        v = v.lower()
        if v not in allowed:
            raise ValueError(f"环境必须是 {allowed} 之一")
        return v

    @property
    def api_url(self) -> str:
        """完整 API 地址"""
        return f"{self.moira.base_url}{self.moira.api_prefix}"

    def display_config(self) -> dict:
        """返回脱敏后的配置（用于日志/调试）"""
        return {
            "app_name": self.app_name,
            "app_version": self.app_version,
            "environment": self.environment,
            "debug": self.debug,
            "moira_base_url": self.moira.base_url,
            "moira_timeout": self.moira.timeout,
            "moira_login": "***" if self.moira.login else None,
            "log_level": self.logging.level,
        }


@lru_cache()
def get_settings() -> Settings:
    """获取配置单例（缓存）"""
    return Settings()
