"""시각표 로드 스킬

모든 노선/방향의 시각표를 동시에 요청하고(fan-out),
전부 완료된 뒤에만 TimetableSet을 만든다(fan-in).
하나라도 실패하면 TimetableLoadError - 일부만 로드된 세트는 반환하지 않는다.

소스는 http(s) URL(aiohttp) 또는 로컬 파일 경로.
"""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path
from typing import Any, ClassVar, Mapping, Optional

import aiohttp

from src.models.config import AppConfig
from src.models.timetable import TimetableSet

logger = logging.getLogger("roundtrip.skill.loader")

Sources = Mapping[str, Mapping[str, str]]


class TimetableLoadError(RuntimeError):
    """시각표 로드 실패 (세션 치명 오류)"""


def _is_remote(source: str) -> bool:
    return source.startswith(("http://", "https://"))


class TimetableLoaderSkill:
    """시각표 동시 로드 스킬

    setup() → execute() → teardown() 순서로 사용한다.
    """

    HEADERS: ClassVar[dict[str, str]] = {
        "Accept": "application/json",
    }

    def __init__(
        self,
        request_timeout: float = 15.0,
        connect_timeout: float = 5.0,
        max_connections: int = 4,
    ) -> None:
        self._request_timeout = request_timeout
        self._connect_timeout = connect_timeout
        self._max_connections = max_connections
        self._session: Optional[aiohttp.ClientSession] = None

    async def setup(self) -> None:
        if self._session is None or self._session.closed:
            timeout = aiohttp.ClientTimeout(
                total=self._request_timeout,
                connect=self._connect_timeout,
            )
            connector = aiohttp.TCPConnector(limit=self._max_connections)
            self._session = aiohttp.ClientSession(
                timeout=timeout,
                connector=connector,
                headers=self.HEADERS,
            )

    async def teardown(self) -> None:
        if self._session and not self._session.closed:
            await self._session.close()
        self._session = None

    async def execute(self, input_data: Sources) -> TimetableSet:
        """{line: {direction: source}} → TimetableSet"""
        entries = [
            (line, direction, source)
            for line, dirs in input_data.items()
            for direction, source in dirs.items()
        ]
        logger.info("시각표 로드 시작: %d개 소스", len(entries))

        results = await asyncio.gather(
            *(self._fetch(source) for _, _, source in entries),
            return_exceptions=True,
        )

        # 방향이 하나도 없는 노선도 누락 방향으로 검출
        raw: dict[str, dict[str, Any]] = {line: {} for line in input_data}
        failures: list[str] = []
        first_error: Optional[BaseException] = None
        for (line, direction, source), result in zip(entries, results):
            if isinstance(result, BaseException):
                logger.error("로드 실패 %s/%s (%s): %s", line, direction, source, result)
                failures.append(f"{line}/{direction}")
                first_error = first_error or result
                continue
            raw[line][direction] = result

        if failures:
            raise TimetableLoadError(
                f"시각표 로드 실패: {', '.join(failures)}"
            ) from first_error

        try:
            timetables = TimetableSet.from_raw(raw)
        except ValueError as e:
            raise TimetableLoadError(f"시각표 형식 오류: {e}") from e

        logger.info(
            "시각표 로드 완료: 노선 %s",
            ", ".join(timetables.line_ids),
        )
        return timetables

    async def _fetch(self, source: str) -> Any:
        logger.debug("요청: %s", source)
        if _is_remote(source):
            return await self._fetch_remote(source)
        return await self._fetch_local(source)

    async def _fetch_remote(self, url: str) -> Any:
        if self._session is None:
            raise RuntimeError("setup()이 호출되지 않았습니다")
        async with self._session.get(url) as resp:
            resp.raise_for_status()
            # 정적 호스팅은 Content-Type이 제각각이므로 검사 없이 파싱
            return await resp.json(content_type=None)

    @staticmethod
    async def _fetch_local(path: str) -> Any:
        text = await asyncio.to_thread(Path(path).read_text, encoding="utf-8")
        return json.loads(text)


async def load_timetables(
    sources: Sources,
    config: Optional[AppConfig] = None,
) -> TimetableSet:
    """로더 스킬 전체 라이프사이클 실행"""
    config = config or AppConfig()
    loader = TimetableLoaderSkill(
        request_timeout=config.request_timeout,
        connect_timeout=config.connect_timeout,
        max_connections=config.max_connections,
    )
    await loader.setup()
    try:
        return await loader.execute(sources)
    finally:
        await loader.teardown()
