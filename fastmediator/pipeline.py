"""Pipeline behavior 체인 합성."""
from typing import Any, Sequence

from fastmediator.core import Next, PipelineBehavior


def _wrap(behavior: PipelineBehavior, request: Any, next: Next) -> Next:
    # 루프 변수의 late binding 을 피하기 위해 별도 함수로 클로저를 만듭니다.
    def _step():
        return behavior.handle(request, next)

    return _step


def compose(behaviors: Sequence[PipelineBehavior], request: Any, terminal: Next) -> Next:
    """``behaviors`` 를 오른쪽부터 접어 하나의 continuation 으로 만듭니다.

    ``[B1, B2, B3]`` 와 핸들러 호출 ``H`` 가 주어지면 ``B1(next=B2(next=B3(next=H)))``
    가 되며, 먼저 등록된 behavior 가 가장 바깥쪽에서 실행됩니다.
    """
    pipeline = terminal
    for behavior in reversed(behaviors):
        pipeline = _wrap(behavior, request, pipeline)
    return pipeline
