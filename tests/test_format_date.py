"""
날짜 포맷팅 테스트 모듈
=====================

이 모듈은 format_date 모듈의 상대/절대 날짜 표기 기능을 테스트합니다.

테스트 항목:
- 상대 시간 표기 (방금 전 ~ N년 전)
- 미래 날짜 처리
- 절대 시간 표기 (YYYY.MM.DD, 한국어 표기)
- 잘못된 입력 처리

작성자: AI Assistant
버전: 1.0.0
"""

import unittest
import sys
import os
from datetime import date, datetime, timedelta, timezone

# 상위 디렉토리를 Python 경로에 추가
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from src.utils.format_date import format_date, format_date_absolute


class TestFormatDate(unittest.TestCase):
    """
    format_date 함수의 테스트 케이스
    """

    def setUp(self):
        """
        기준 시각 고정
        """
        self.now = datetime(2024, 6, 1, 12, 0, 0, tzinfo=timezone.utc)

    def ago(self, **kwargs):
        return format_date(self.now - timedelta(**kwargs), now=self.now)

    def test_just_now(self):
        """
        1분 미만은 "방금 전"
        """
        self.assertEqual(self.ago(seconds=30), '방금 전')
        self.assertEqual(self.ago(seconds=0), '방금 전')

    def test_minutes_hours_days(self):
        """
        분, 시간, 일 단위 표기
        """
        self.assertEqual(self.ago(minutes=30), '30분 전')
        self.assertEqual(self.ago(hours=5), '5시간 전')
        self.assertEqual(self.ago(days=3), '3일 전')

    def test_weeks_months_years(self):
        """
        주, 개월, 년 단위 표기
        """
        self.assertEqual(self.ago(weeks=2), '2주 전')
        self.assertEqual(self.ago(days=90), '3개월 전')
        self.assertEqual(self.ago(days=2 * 365), '2년 전')

    def test_string_input(self):
        """
        ISO 문자열 입력 처리
        """
        self.assertEqual(format_date('2024-06-01T11:00:00Z', now=self.now), '1시간 전')
        self.assertEqual(format_date('2024-06-01T20:00:00+09:00', now=self.now), '1시간 전')

    def test_naive_input_is_utc(self):
        """
        시간대 정보가 없는 값은 UTC로 간주
        """
        self.assertEqual(format_date(datetime(2024, 6, 1, 11, 0, 0), now=self.now), '1시간 전')

    def test_future_dates(self):
        """
        미래 날짜 처리
        """
        self.assertEqual(format_date(self.now + timedelta(hours=3), now=self.now), '곧')
        self.assertEqual(format_date(self.now + timedelta(days=1, hours=1), now=self.now), '내일')
        self.assertEqual(format_date(self.now + timedelta(days=5), now=self.now), '5일 후')

    def test_invalid_and_missing(self):
        """
        잘못된 날짜와 None 처리
        """
        self.assertEqual(format_date('invalid-date', now=self.now), '날짜 없음')
        self.assertEqual(format_date(12345, now=self.now), '날짜 없음')
        self.assertEqual(format_date(None), '-')

    def test_non_iso_strings(self):
        """
        ISO-8601 형식이 아닌 문자열은 "날짜 없음"
        """
        for value in ['now', 'today', 'Jan 15, 2024', '15/01/2024']:
            self.assertEqual(format_date(value, now=self.now), '날짜 없음', value)

    def test_invalid_reference_time(self):
        """
        해석할 수 없는 기준 시각은 ValueError
        """
        with self.assertRaises(ValueError):
            format_date('2024-06-01T11:00:00Z', now='invalid-date')

    def test_default_now(self):
        """
        기준 시각을 생략하면 현재 시각 사용
        """
        recent = datetime.now(timezone.utc) - timedelta(seconds=5)
        self.assertEqual(format_date(recent), '방금 전')


class TestFormatDateAbsolute(unittest.TestCase):
    """
    format_date_absolute 함수의 테스트 케이스
    """

    def test_date_only(self):
        """
        YYYY.MM.DD 표기
        """
        self.assertEqual(format_date_absolute('2024-01-15'), '2024.01.15')
        self.assertEqual(format_date_absolute(date(2024, 1, 15)), '2024.01.15')

    def test_with_time(self):
        """
        YYYY.MM.DD HH:MM 표기
        """
        self.assertEqual(format_date_absolute('2024-01-15T14:30:00'), '2024.01.15 14:30')
        self.assertEqual(format_date_absolute(datetime(2024, 1, 15, 9, 5)), '2024.01.15 09:05')

    def test_keeps_input_timezone(self):
        """
        입력 시간대를 UTC로 변환하지 않음
        """
        self.assertEqual(format_date_absolute('2024-01-15T14:30:00+09:00'), '2024.01.15 14:30')

    def test_korean_style(self):
        """
        한국어 표기
        """
        self.assertEqual(format_date_absolute('2024-01-15', 'ko'), '2024년 1월 15일')

    def test_invalid_and_missing(self):
        """
        잘못된 날짜, None, 지원하지 않는 표기 방식 처리
        """
        self.assertEqual(format_date_absolute('invalid-date'), '날짜 없음')
        self.assertEqual(format_date_absolute('Jan 15, 2024'), '날짜 없음')
        self.assertEqual(format_date_absolute('today'), '날짜 없음')
        self.assertEqual(format_date_absolute(None), '-')
        with self.assertRaises(ValueError):
            format_date_absolute('2024-01-15', 'iso')


if __name__ == '__main__':
    unittest.main()
