"""
입력값 검증 모듈
===============

회원가입/로그인 폼에서 제출된 이메일, 비밀번호, 사용자명을 검증합니다.
모든 검증 함수는 예외를 던지지 않고 ValidationResult를 반환합니다.

주요 기능:
- 이메일 형식 검증
- 비밀번호 정책 검증 (위반 항목 전체 반환)
- 사용자명 규칙 검증 (첫 번째 위반 항목 반환)

작성자: AI Assistant
버전: 1.0.0
"""

import logging
import re
from typing import Any, Callable, List, Optional, Tuple

from ..core.config import (
    PASSWORD_MIN_LENGTH,
    USERNAME_MIN_LENGTH,
    USERNAME_MAX_LENGTH,
    USERNAME_SPECIAL_CHARS,
)
from ..core.models import ValidationResult

logger = logging.getLogger(__name__)

# 로컬 파트 @ 도메인(점으로 구분된 라벨 2개 이상), 공백 불가
EMAIL_PATTERN = re.compile(r'[^\s@]+@[^\s@.]+(?:\.[^\s@.]+)+')

USERNAME_ALLOWED_PATTERN = re.compile(r'[가-힣a-zA-Z0-9_-]+')
USERNAME_START_PATTERN = re.compile(r'^[가-힣a-zA-Z]')
USERNAME_CONSECUTIVE_SPECIAL_PATTERN = re.compile(r'[_-]{2,}')

# (통과 조건, 실패 메시지) 순서대로 모두 검사
PASSWORD_RULES: List[Tuple[Callable[[str], bool], str]] = [
    (lambda p: len(p) >= PASSWORD_MIN_LENGTH, f"최소 {PASSWORD_MIN_LENGTH}자 이상이어야 합니다"),
    (lambda p: re.search(r'[A-Z]', p) is not None, "대문자가 포함되어야 합니다"),
    (lambda p: re.search(r'[a-z]', p) is not None, "소문자가 포함되어야 합니다"),
    (lambda p: re.search(r'[0-9]', p) is not None, "숫자가 포함되어야 합니다"),
    (lambda p: re.search(r'[^a-zA-Z0-9]', p) is not None, "특수문자가 포함되어야 합니다"),
]


def _is_blank(value: Any) -> bool:
    return not isinstance(value, str) or value == ""


def validate_email(email: Optional[str]) -> ValidationResult:
    """
    이메일 주소 형식을 검증하는 함수

    한글 등 비ASCII 도메인 라벨도 허용합니다.

    Args:
        email (Optional[str]): 검증할 이메일 주소

    Returns:
        ValidationResult: 검증 결과 (실패 시 error 포함)
    """
    if _is_blank(email):
        return ValidationResult(valid=False, error="이메일을 입력해주세요")

    if re.search(r'\s', email):
        return ValidationResult(valid=False, error="이메일에 공백을 포함할 수 없습니다")

    if "@" not in email:
        return ValidationResult(valid=False, error="이메일에 @ 기호가 포함되어야 합니다")

    local_part, _, domain = email.partition("@")
    if not local_part:
        return ValidationResult(valid=False, error="@ 앞의 아이디 부분이 비어 있습니다")
    if not domain:
        return ValidationResult(valid=False, error="@ 뒤의 도메인이 비어 있습니다")

    if not EMAIL_PATTERN.fullmatch(email):
        return ValidationResult(valid=False, error="올바른 이메일 형식이 아닙니다")

    return ValidationResult(valid=True)


def validate_password(password: Optional[str]) -> ValidationResult:
    """
    비밀번호 정책을 검증하는 함수

    길이, 대문자, 소문자, 숫자, 특수문자 규칙을 모두 검사하여
    위반한 항목을 규칙 순서대로 전부 반환합니다.

    Args:
        password (Optional[str]): 검증할 비밀번호

    Returns:
        ValidationResult: 검증 결과 (실패 시 errors 포함)
    """
    if _is_blank(password):
        return ValidationResult(valid=False, errors=["비밀번호를 입력해주세요"])

    errors = [message for check, message in PASSWORD_RULES if not check(password)]
    if errors:
        logger.debug("비밀번호 정책 위반 %d건", len(errors))
        return ValidationResult(valid=False, errors=errors)
    return ValidationResult(valid=True)


def validate_username(username: Optional[str]) -> ValidationResult:
    """
    사용자명 규칙을 검증하는 함수

    규칙 (위에서부터 검사하여 첫 번째 위반 항목만 반환):
    - 3자 이상 20자 이하
    - 한글, 영문, 숫자, 밑줄(_), 하이픈(-)만 사용
    - 밑줄/하이픈으로 시작하거나 끝날 수 없음
    - 영문 또는 한글로 시작
    - 밑줄/하이픈을 연속으로 사용할 수 없음

    Args:
        username (Optional[str]): 검증할 사용자명

    Returns:
        ValidationResult: 검증 결과 (실패 시 error 포함)
    """
    if _is_blank(username):
        return ValidationResult(valid=False, error="사용자명을 입력해주세요")

    if len(username) < USERNAME_MIN_LENGTH:
        return ValidationResult(valid=False, error=f"최소 {USERNAME_MIN_LENGTH}자 이상이어야 합니다")

    if len(username) > USERNAME_MAX_LENGTH:
        return ValidationResult(valid=False, error=f"최대 {USERNAME_MAX_LENGTH}자 이하여야 합니다")

    if not USERNAME_ALLOWED_PATTERN.fullmatch(username):
        return ValidationResult(
            valid=False,
            error="한글, 영문, 숫자, 밑줄(_), 하이픈(-)만 사용할 수 있습니다"
        )

    if username[0] in USERNAME_SPECIAL_CHARS or username[-1] in USERNAME_SPECIAL_CHARS:
        return ValidationResult(
            valid=False,
            error="밑줄(_)이나 하이픈(-)으로 시작하거나 끝날 수 없습니다"
        )

    if not USERNAME_START_PATTERN.match(username):
        return ValidationResult(valid=False, error="영문 또는 한글로 시작해야 합니다")

    if USERNAME_CONSECUTIVE_SPECIAL_PATTERN.search(username):
        return ValidationResult(valid=False, error="밑줄(_)이나 하이픈(-)을 연속으로 사용할 수 없습니다")

    return ValidationResult(valid=True)
