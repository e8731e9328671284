"""快照服务：把聚合结果写入 JSON 文件，供 /articles 直接读取"""
import json
import os
import tempfile
from pathlib import Path
from typing import List, Optional, Sequence, Union
from pydantic import ValidationError
from codepicks.config import settings
from codepicks.exceptions import SnapshotReadError
from codepicks.models.article import Article
from codepicks.utils.logger import logger

SNAPSHOT_FILE_MODE = 0o644


class SnapshotStore:
    """快照文件读写"""

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        初始化快照存储

        Args:
            path: 快照文件路径，默认取配置 snapshot_path
        """
        self.path = Path(path or settings.snapshot_path)

    def write(self, articles: Sequence[Article]) -> int:
        """
        原子写入快照：先写同目录临时文件并 fsync，再用 os.replace 覆盖目标文件，
        读方只会看到旧的完整文件或新的完整文件。

        Returns:
            写入条数
        """
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [a.to_dict() for a in articles]
        fd, tmp_name = tempfile.mkstemp(
            dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(payload, f, ensure_ascii=False, indent=2)
                f.write("\n")
                f.flush()
                os.fsync(f.fileno())
            # mkstemp 创建的文件为 0600，服务进程可能以其他用户读取
            os.chmod(tmp_name, SNAPSHOT_FILE_MODE)
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        logger.info(f"快照已写入: {self.path}, count={len(payload)}")
        return len(payload)

    def read(self) -> List[Article]:
        """
        读取快照（保持文件中的顺序）

        Raises:
            SnapshotReadError: 文件不存在、不是合法 JSON 或记录格式不正确
        """
        try:
            with self.path.open("r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise SnapshotReadError(f"快照文件不存在: {self.path}") from e
        except (OSError, ValueError) as e:
            raise SnapshotReadError(f"快照文件读取失败: {self.path}: {e}") from e

        if not isinstance(data, list):
            raise SnapshotReadError(f"快照文件格式错误: {self.path}")
        try:
            return [Article.model_validate(item) for item in data]
        except ValidationError as e:
            raise SnapshotReadError(f"快照记录格式错误: {self.path}: {e}") from e
