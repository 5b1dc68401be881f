"""
Core layer: 파일시스템 협력자와 설정.

역할:
- 파일 존재 확인, 원문 읽기, mtime, 경로 정규화 (filesystem.py)
- default.yaml 로드 → TemplateLoader 생성 (config.py)
"""

from .filesystem import Filesystem, LocalFilesystem

__all__ = [
    # filesystem
    "Filesystem",
    "LocalFilesystem",
]
