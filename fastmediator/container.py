"""핸들러 인스턴스를 만들어 주는 기본 의존성 컨테이너.

클래스마다 하나의 인스턴스(singleton)를 만들어 캐시합니다. 생성자 파라메터는
*이름* 으로 ``dependencies`` 에서 찾아 주입합니다. 예를 들어
``def __init__(self, repo, clock)`` 같은 핸들러가 있다면
``Container(dependencies={"repo": repo, "clock": clock})`` 로 생성할 수 있습니다.
"""
from __future__ import annotations

from inspect import Parameter, signature
from typing import Any, Callable, Iterable, Mapping, Optional, Type, TypeVar

from fastmediator.core import ResolutionError, get_logger

T = TypeVar("T")

logger = get_logger("fastmediator.container")

_SKIPPED_KINDS = (Parameter.VAR_POSITIONAL, Parameter.VAR_KEYWORD)


class Container:
    """클래스 -> 인스턴스 해석기 (:class:`~fastmediator.core.Resolver` 구현)."""

    def __init__(
        self,
        classes: Iterable[type] = (),
        dependencies: Optional[Mapping[str, Any]] = None,
        factories: Optional[Mapping[type, Callable[[], Any]]] = None,
    ):
        self.classes = list(classes)
        self.dependencies = dict(dependencies or {})
        self.factories = dict(factories or {})
        self.instances: dict[type, Any] = {}
        self.params_cache: dict[type, Mapping[str, Parameter]] = {}
        """생성자 파라메터 캐시. 이름에 따른 Dependency Injection을 위해 사용합니다."""

    def __contains__(self, cls: type) -> bool:
        return cls in self.instances

    def register(self, cls: type, factory: Optional[Callable[[], Any]] = None):
        if cls not in self.classes:
            self.classes.append(cls)
        if factory:
            self.factories[cls] = factory

    def register_instance(self, cls: Type[T], instance: T):
        self.register(cls)
        self.instances[cls] = instance

    def get(self, cls: Type[T]) -> T:
        """``cls`` 의 인스턴스를 리턴합니다. 처음 요청될 때 한 번만 생성합니다."""
        if cls not in self.instances:
            self.instances[cls] = self._create(cls)
        return self.instances[cls]

    def warm_up(self):
        """등록된 모든 클래스의 인스턴스를 미리 생성합니다."""
        for cls in self.classes:
            self.get(cls)

    def _create(self, cls: type) -> Any:
        factory = self.factories.get(cls)
        if factory:
            return factory()

        params = self.params_cache.get(cls)
        if params is None:
            params = self.params_cache[cls] = self._init_params(cls)

        kwargs = {}
        missing = []
        for name, param in params.items():
            if param.kind in _SKIPPED_KINDS:
                continue
            if name in self.dependencies:
                kwargs[name] = self.dependencies[name]
            elif param.default is Parameter.empty:
                missing.append(name)

        if missing:
            logger.error(
                "RESOLUTION FAILED: class=%r, missing dependencies: %r", cls, missing
            )
            raise ResolutionError(
                f"cannot create {cls.__name__}: missing dependencies {missing!r}"
            )

        return cls(**kwargs)

    @staticmethod
    def _init_params(cls: type) -> Mapping[str, Parameter]:
        if cls.__init__ is object.__init__:
            return {}
        try:
            return signature(cls).parameters
        except (TypeError, ValueError):
            return {}
