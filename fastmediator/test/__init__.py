"""Test 헬퍼를 제공하는 모듈.

- SpyResolver 나 RecordingBehavior 같은 테스트용 객체를 기본 제공합니다.

"""
