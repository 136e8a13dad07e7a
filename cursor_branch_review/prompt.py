"""Review prompt assembly."""

from __future__ import annotations

from .exceptions import ValidationError

INVOCATION_MARKER = "@branch"

REVIEW_SECTIONS = (
    "1. 代码变更概述",
    "2. 代码质量评估",
    "3. 安全性检查",
    "4. 改进建议",
)

# The trailing space after the marker is part of the template.
REVIEW_TEMPLATE = """{marker} 
请对比当前分支 {current} 和 {comparison} 分支的差异，分析以下内容：

1. 代码变更概述：添加了哪些功能，修改了哪些文件
2. 代码质量评估：
   - 代码风格是否一致
   - 是否有潜在的bug或性能问题
   - 是否遵循最佳实践
3. 安全性检查：是否存在安全隐患
4. 改进建议：如何优化当前实现

请提供详细的代码审核报告。
"""


def build_review_prompt(current_branch: str, comparison_branch: str) -> str:
    """Fill the review template with the two branch names.

    Names are inserted verbatim. Nothing is escaped, so a branch name that
    reads like an instruction ends up in the prompt unchanged.
    """

    if not current_branch or not comparison_branch:
        raise ValidationError("Both branch names are required to build a review prompt.")
    return REVIEW_TEMPLATE.format(
        marker=INVOCATION_MARKER,
        current=current_branch,
        comparison=comparison_branch,
    )
