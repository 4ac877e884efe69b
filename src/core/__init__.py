"""
핵심 설정 패키지
===============

이 패키지는 헬퍼 라이브러리 전반에서 공유하는 설정과 데이터 모델을 포함합니다.

모듈 목록:
- config: 설정 및 도메인 상수 관리
- logging_config: 로깅 핸들러 설정
- models: 도시/게시글/검증 결과 데이터 모델

작성자: AI Assistant
버전: 1.0.0
"""
