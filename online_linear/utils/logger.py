#!filepath: online_linear/utils/logger.py
import os
import sys
import json
from functools import wraps
from time import perf_counter
from loguru import logger
from typing import Callable, Optional


class Logging:
    """
    生产级日志模块
    ---------------------------------------
    - 默认只输出到 stderr（import 时不创建目录）
    - configure() 之后追加按日期切割的文件日志
    - 支持日志保留周期
    - 包含函数级日志装饰器
    ---------------------------------------
    """

    def __init__(self, log_level: str = "INFO"):
        self.level = log_level
        self.log_dir: Optional[str] = None
        self._file_sink: Optional[int] = None

        logger.remove()
        logger.add(
            sink=sys.stderr,
            level=self.level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
        )

    def configure(
        self,
        log_dir: str = "logs",
        rotation: str = "1 day",
        retention: str = "30 days",
        level: str = "INFO",
    ) -> None:
        """
        追加文件 sink，重复调用只保留最后一个
        """
        if self._file_sink is not None:
            try:
                logger.remove(self._file_sink)
            except ValueError:
                # 已被外部 logger.remove() 清掉
                pass
            self._file_sink = None

        os.makedirs(log_dir, exist_ok=True)
        self.log_dir = log_dir
        self.level = level

        self._file_sink = logger.add(
            sink=f"{log_dir}/{{time:YYYY-MM-DD}}.log",
            rotation=rotation,
            retention=retention,
            level=level,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {message}",
            enqueue=True,  # 多进程安全
            backtrace=True,
            diagnose=True,
        )

        logger.info("-----------Logger initialized successfully.-----------")

    # ----------- 日志方法 -----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- 日志装饰器 ----------
    def catch(
        self,
        msg: str = "Exception occurred",
        log_inputs: bool = False,
        log_outputs: bool = False,
        log_time: bool = True,
    ) -> Callable:
        """
        冷路径专用（训练入口 / 配置加载），不要挂在 score / update 上。
        """

        def decorator(func: Callable):
            @wraps(func)
            def wrapper(*args, **kwargs):

                if log_inputs:
                    logger.info(
                        f"[CALL] {func.__name__} args={args}, "
                        f"kwargs={json.dumps(kwargs, ensure_ascii=False, default=str)}"
                    )

                start = perf_counter()

                try:
                    result = func(*args, **kwargs)
                except Exception:
                    logger.exception(f"[ERROR] {func.__name__}: {msg}")
                    raise

                if log_outputs:
                    logger.info(f"[RETURN] {func.__name__} result={result}")

                if log_time:
                    cost = perf_counter() - start
                    logger.info(f"[TIME] {func.__name__} took {cost:.4f}s")

                return result

            return wrapper

        return decorator


# 默认全局 logs（configure 之后追加文件日志）
logs = Logging()
