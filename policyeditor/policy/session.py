"""Background load/save for an editing session.

A session runs its file work on a single worker thread, so one load or
save is in flight at a time and later requests queue behind it. Callers
must not edit ``session.model`` while a queued save may be rendering it;
a load that completes replaces the model, dropping edits made meanwhile.
"""

from __future__ import annotations

from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Callable, Dict, Optional

from .config import config_from_env
from .editor import load_policy, save_policy
from .errors import PathLike
from .log import log
from .models import PolicyModel

DoneCallback = Callable[[Future], None]


class PolicySession:
    def __init__(
        self,
        path: Optional[PathLike] = None,
        *,
        cfg: Dict | None = None,
        executor: Optional[Executor] = None,
    ) -> None:
        self.cfg = config_from_env(cfg)
        self.model = PolicyModel(path, global_alias=self.cfg["globalDisplayName"])
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=1, thread_name_prefix="policyeditor-io")
        self._pending: Optional[Future] = None

    @property
    def busy(self) -> bool:
        return self._pending is not None and not self._pending.done()

    def _submit(self, fn: Callable, on_done: Optional[DoneCallback]) -> Future:
        future = self._executor.submit(fn)
        self._pending = future
        if on_done is not None:
            future.add_done_callback(on_done)
        return future

    def load(self, path: Optional[PathLike] = None, *, on_done: Optional[DoneCallback] = None) -> Future:
        target = path if path is not None else self.model.path

        def _run() -> PolicyModel:
            model = load_policy(target, cfg=self.cfg)
            self.model = model
            return model

        return self._submit(_run, on_done)

    def save(
        self,
        path: Optional[PathLike] = None,
        *,
        force: bool = False,
        on_done: Optional[DoneCallback] = None,
    ) -> Future:
        def _run() -> bool:
            saved = save_policy(path, self.model, cfg=self.cfg, force=force)
            if not saved:
                log("no changes to save")
            return saved

        return self._submit(_run, on_done)

    def close(self, wait: bool = True) -> None:
        if self._owns_executor:
            self._executor.shutdown(wait=wait)

    def __enter__(self) -> "PolicySession":
        return self

    def __exit__(self, *_exc) -> None:
        self.close()
