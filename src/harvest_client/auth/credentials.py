"""Look up the Harvest access token and account settings.

A value is taken from the first source that has one:

1. the explicit argument,
2. the process environment, which includes anything loaded from ``.env``
   by python-dotenv (real environment variables are never overridden),
3. the default.

A token can also live in a file, e.g. a mounted secret, whose path is given
directly or through an environment variable such as
``HARVEST_ACCESS_TOKEN_FILE``.

Example:
    ```python
    from harvest_client.auth import CredentialResolver

    resolver = CredentialResolver()
    token = resolver.resolve_from_file(env_var_name="HARVEST_ACCESS_TOKEN_FILE") or resolver.resolve(
        env_var_name="HARVEST_ACCESS_TOKEN", required=True
    )
    ```

Secret values never reach the logs, only where they came from.
"""

import errno
import logging
import os
from pathlib import Path
from threading import Lock

from dotenv import load_dotenv

from harvest_client.auth.exceptions import CredentialFileError, CredentialNotFoundError

logger = logging.getLogger(__name__)

MASK = "***"


def _read_error_message(path: Path, error: OSError) -> str:
    if error.errno == errno.ENOENT:
        return f"Credential file not found: {path}"
    if error.errno in (errno.EACCES, errno.EPERM):
        return f"Permission denied reading credential file: {path}"
    return f"Cannot read credential file {path}: {error.strerror or error}"


class CredentialResolver:
    """Resolve settings from explicit values, the environment, ``.env`` and defaults.

    The ``.env`` file is loaded at most once per resolver.
    """

    def __init__(self, dotenv_path: str | None = None, load_dotenv: bool = True):
        """
        Args:
            dotenv_path: ``.env`` file to load. None lets python-dotenv search
                upwards from the working directory.
            load_dotenv: Skip ``.env`` entirely when False.
        """
        self._dotenv_path = dotenv_path
        self._dotenv_lock = Lock()
        self._dotenv_loaded = False

        if load_dotenv:
            self._ensure_dotenv_loaded()

    def _ensure_dotenv_loaded(self) -> None:
        with self._dotenv_lock:
            if self._dotenv_loaded:
                return
            try:
                found = load_dotenv(dotenv_path=self._dotenv_path)
            except OSError as e:
                logger.warning(f"Could not load .env file: {e}")
            else:
                logger.debug(f".env file {'loaded' if found else 'not found'}")
            self._dotenv_loaded = True

    def resolve(
        self,
        *,
        value: str | None = None,
        env_var_name: str | None = None,
        default: str | None = None,
        required: bool = False,
        mask_in_logs: bool = True,
    ) -> str | None:
        """Return the first available value.

        Args:
            value: Explicit value; wins when not None.
            env_var_name: Environment variable to read.
            default: Used when neither of the above is set.
            required: Raise instead of returning None.
            mask_in_logs: Log ``***`` in place of the value. Turn off for
                settings that are not secret, like the base URL.

        Raises:
            CredentialNotFoundError: If ``required`` and nothing was found.
        """
        candidates = [(value, "explicit parameter")]
        if env_var_name:
            candidates.append((os.environ.get(env_var_name), f"environment variable '{env_var_name}'"))
        candidates.append((default, "default value"))

        for candidate, source in candidates:
            if candidate is not None:
                logger.debug(f"Resolved credential from {source}: {MASK if mask_in_logs else candidate}")
                return candidate

        if required:
            where = f" (checked env var: {env_var_name})" if env_var_name else ""
            raise CredentialNotFoundError(f"Required credential not found{where}", env_var_name=env_var_name)
        return None

    def resolve_from_file(
        self,
        *,
        file_path: str | Path | None = None,
        env_var_name: str | None = None,
        required: bool = False,
    ) -> str | None:
        """Read a secret from a file, stripped of surrounding whitespace.

        ``~`` and ``$VAR`` in the path are expanded. An empty file counts as
        missing.

        Args:
            file_path: File to read.
            env_var_name: Environment variable holding the path, consulted
                when ``file_path`` is None.
            required: Raise instead of returning None.

        Raises:
            CredentialFileError: If ``required`` and no readable, non-empty
                file was found.
        """
        if file_path is None and env_var_name:
            file_path = self.resolve(env_var_name=env_var_name, mask_in_logs=False) or None

        if file_path is None:
            if required:
                hint = f" (env var '{env_var_name}' not set)" if env_var_name else ""
                raise CredentialFileError(f"No file path provided for credential resolution{hint}")
            return None

        path = Path(os.path.expandvars(os.path.expanduser(str(file_path))))
        try:
            content = path.read_text().strip()
        except OSError as e:
            message = _read_error_message(path, e)
            if required:
                raise CredentialFileError(message) from e
            logger.warning(message)
            return None

        if not content:
            if required:
                raise CredentialFileError(f"Credential file is empty: {path}")
            logger.warning(f"Credential file is empty: {path}")
            return None

        logger.debug(f"Resolved credential from file {path}: {MASK}")
        return content
