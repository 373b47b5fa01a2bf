"""
Server process lifecycle: listen against a record store, stop cleanly.

Used by the entry point and by orchestration / integration tests that need a
real listening socket.
"""

import asyncio
import logging
import socket
from typing import Callable

import uvicorn
from fastapi import FastAPI

from app.adapters.supabase_adapter import SupabasePostAdapter
from app.application import create_app
from app.config import Settings, get_settings
from app.ports.post_port import PostPort

logger = logging.getLogger(__name__)

StoreFactory = Callable[[str], PostPort]


class BlogServer:
    """Owns one uvicorn server and the store connection behind it."""

    def __init__(
        self,
        settings: Settings | None = None,
        store_factory: StoreFactory | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._store_factory = store_factory or self._connect_supabase
        self._server: uvicorn.Server | None = None
        self._task: asyncio.Task | None = None
        self.store: PostPort | None = None
        self.app: FastAPI | None = None

    def _connect_supabase(self, database_url: str) -> PostPort:
        return SupabasePostAdapter.connect(
            database_url,
            self._settings.supabase_service_role_key,
            table=self._settings.posts_table,
        )

    @property
    def running(self) -> bool:
        return self._server is not None and self._server.started

    @property
    def port(self) -> int:
        """The bound port (differs from the configured one when that was 0)."""
        if not self.running:
            raise RuntimeError("Server is not running")
        return self._server.servers[0].sockets[0].getsockname()[1]

    async def start(self, database_url: str | None = None) -> FastAPI:
        """Connect to the record store and begin listening. Returns the app."""
        if self._server is not None:
            raise RuntimeError("Server already started")

        self.store = self._store_factory(database_url or self._settings.supabase_url)
        sock = None
        try:
            # Bind here so an occupied port raises OSError instead of uvicorn's sys.exit
            sock = socket.create_server((self._settings.host, self._settings.port))
            self.app = create_app(store=self.store, settings=self._settings)
            config = uvicorn.Config(self.app, log_level=self._settings.log_level)
            self._server = uvicorn.Server(config)
            self._task = asyncio.create_task(self._server.serve(sockets=[sock]))

            while not self._server.started:
                if self._task.done():
                    await self._task
                    raise RuntimeError("Server exited before it started listening")
                await asyncio.sleep(0.05)
        except BaseException:
            logger.error(f"Failed to start on {self._settings.host}:{self._settings.port}")
            if self._task is not None and not self._task.done():
                self._task.cancel()
            if sock is not None:
                sock.close()
            self._server = None
            self._task = None
            await self._release_store()
            raise

        logger.info(f"Listening on {self._settings.host}:{self.port}")
        return self.app

    async def stop(self) -> None:
        """Close the listening socket, then the store connection."""
        if self._server is None:
            return
        self._server.should_exit = True
        await self._task
        self._server = None
        self._task = None
        await self._release_store()
        logger.info("Server stopped")

    async def _release_store(self) -> None:
        if self.store is not None:
            await self.store.close()
            self.store = None
