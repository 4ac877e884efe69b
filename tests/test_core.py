"""
핵심 설정 테스트 모듈
===================

이 모듈은 설정, 로깅, 데이터 모델을 테스트합니다.

테스트 항목:
- 설정 요약 정보
- 로깅 핸들러 설치
- City/Post 모델의 camelCase 별칭 처리와 검증
- ValidationResult 직렬화

작성자: AI Assistant
버전: 1.0.0
"""

import json
import logging
import unittest
import sys
import os

from pydantic import ValidationError

# 상위 디렉토리를 Python 경로에 추가
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from src.core.config import ALL_REGIONS, get_config_summary
from src.core.logging_config import JSONFormatter, setup_logging
from src.core.models import City, Post, ValidationResult


class TestConfig(unittest.TestCase):
    """
    config 모듈의 테스트 케이스
    """

    def test_config_summary(self):
        """
        설정 요약 정보 확인
        """
        summary = get_config_summary()
        self.assertEqual(summary['all_regions'], '전체')
        self.assertEqual(summary['username_length'], {'min': 3, 'max': 20})
        self.assertEqual(summary['number_units'], ['조', '억', '만', '천'])
        self.assertEqual(ALL_REGIONS, '전체')


class TestLogging(unittest.TestCase):
    """
    logging_config 모듈의 테스트 케이스
    """

    def setUp(self):
        """
        루트 로거 상태 저장
        """
        self.original_level = logging.root.level

    def tearDown(self):
        """
        테스트에서 추가한 핸들러 제거
        """
        logging.root.removeHandler(self.handler)
        logging.root.setLevel(self.original_level)

    def test_setup_json_logging(self):
        """
        JSON 포맷터 설치와 출력 형식
        """
        self.handler = setup_logging('DEBUG', 'json')
        self.assertIsInstance(self.handler.formatter, JSONFormatter)
        self.assertEqual(logging.root.level, logging.DEBUG)

        record = logging.LogRecord('src.utils', logging.INFO, __file__, 1, '지역 %s', ('강원도',), None)
        log = json.loads(self.handler.formatter.format(record))
        self.assertEqual(log['message'], '지역 강원도')
        self.assertEqual(log['level'], 'INFO')

    def test_setup_text_logging(self):
        """
        텍스트 포맷터 설치
        """
        self.handler = setup_logging('WARNING', 'text')
        self.assertNotIsInstance(self.handler.formatter, JSONFormatter)
        self.assertEqual(logging.root.level, logging.WARNING)


class TestModels(unittest.TestCase):
    """
    데이터 모델의 테스트 케이스
    """

    def test_city_aliases(self):
        """
        camelCase 키와 snake_case 키 모두 허용
        """
        city = City(id='1', name='강릉', region='강원도', monthlyCost=1800000, rating=4.5)
        self.assertEqual(city.monthly_cost, 1800000)
        city = City(id='1', name='강릉', region='강원도', monthly_cost=1800000)
        self.assertEqual(city.monthly_cost, 1800000)

    def test_city_validation(self):
        """
        평점 범위와 빈 지역명 검증
        """
        with self.assertRaises(ValidationError):
            City(id='1', name='강릉', region='강원도', rating=5.5)
        with self.assertRaises(ValidationError):
            City(id='1', name='강릉', region='  ')
        self.assertEqual(City(id='1', name=' 강릉 ', region='강원도').name, '강릉')

    def test_post_extra_fields(self):
        """
        게시글의 추가 필드는 그대로 유지
        """
        post = Post(id='1', title='강릉', cityId='1', author='kim')
        self.assertEqual(post.city_id, '1')
        self.assertEqual(post.author, 'kim')
        self.assertIsNone(post.rating)

    def test_validation_result_dict(self):
        """
        ValidationResult는 값이 있는 키만 직렬화
        """
        self.assertEqual(ValidationResult(valid=True).to_dict(), {'valid': True})
        self.assertEqual(
            ValidationResult(valid=False, errors=['숫자가 포함되어야 합니다']).to_dict(),
            {'valid': False, 'errors': ['숫자가 포함되어야 합니다']}
        )


if __name__ == '__main__':
    unittest.main()
