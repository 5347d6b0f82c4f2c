"""Possum state persistence over a DB-API 2.0 connection."""

import sqlite3
from collections.abc import Iterable, Sequence
from contextlib import contextmanager
from typing import Any, Optional

from possum_app.config.defaults import StoreParams
from possum_app.environment.passel import Passel
from possum_app.environment.provider import EnvironmentProvider
from possum_app.errors import (
    InvalidArgument,
    NotFound,
    PersistenceError,
    SchemaError,
    StoreError,
)
from possum_app.logging.config import get_store_logger, log_state_write

from .models import PossumState, StateRecord

TABLE_NAME = "state"
DEFAULT_STATE = PossumState.ALIVE


class StateStore:
    """
    Liveness state table for a passel of possums.

    The connection is owned by the caller; the store never opens, pools or
    closes it. Each write is committed on its own, so an interrupted
    ``setup`` leaves already-processed possums initialized and can simply be
    run again.

    Driver failures are recognized through ``driver_errors``, which defaults
    to ``sqlite3.Error``. Pass the driver module's ``Error`` class when using
    another DB-API driver, together with ``StoreParams(placeholder="%s")``
    for format-style drivers.

    ``strict_writes`` relies on the driver reporting matched rows. MySQL
    drivers report changed rows unless connected with CLIENT.FOUND_ROWS, so
    rewriting a possum's current state would look like a missing row; run
    them with ``StoreParams(placeholder="%s", strict_writes=False)``.
    """

    def __init__(
        self,
        conn: Any,
        params: Optional[StoreParams] = None,
        driver_errors: tuple[type[BaseException], ...] = (sqlite3.Error,),
    ):
        self.conn = conn
        self.params = params or StoreParams()
        self.driver_errors = driver_errors
        self.logger = get_store_logger(__name__)

    # -------- SQL helpers --------
    def _sql(self, template: str) -> str:
        return template.format(table=TABLE_NAME, ph=self.params.placeholder)

    def _rollback(self) -> None:
        try:
            self.conn.rollback()
        except self.driver_errors as e:
            self.logger.warning("Rollback failed", error=str(e))

    @contextmanager
    def _cursor(
        self,
        operation: str,
        possum: Optional[str] = None,
        error_cls: type[PersistenceError] = StoreError,
    ):
        """Yield a cursor, translating driver errors into ``error_cls``."""
        cursor = None
        try:
            cursor = self.conn.cursor()
            yield cursor
        except self.driver_errors as e:
            self.logger.error(
                "Database error",
                operation=operation,
                possum=possum,
                error=str(e),
            )
            self._rollback()
            target = f" for possum {possum}" if possum is not None else ""
            raise error_cls(
                f"{operation} failed{target}: {e}",
                operation=operation,
                possum=possum,
            ) from e
        finally:
            if cursor is not None:
                cursor.close()

    def _lookup(self, possum: str) -> StateRecord:
        with self._cursor("lookup", possum) as cursor:
            cursor.execute(
                self._sql("SELECT possum, state FROM {table} WHERE possum = {ph}"),
                (possum,),
            )
            row = cursor.fetchone()

        if row is None:
            raise NotFound(
                f"Could not find possum {possum} in db",
                operation="lookup",
                possum=possum,
            )
        return StateRecord(possum=row[0], state=row[1])

    # -------- Initialization --------
    def create_schema(self) -> None:
        """Create the state table if it does not exist."""
        with self._cursor("create_schema", error_cls=SchemaError) as cursor:
            cursor.execute(self._sql("""
                CREATE TABLE IF NOT EXISTS {table} (
                    possum varchar(255),
                    state varchar(255)
                )
            """))
            self.conn.commit()

    def setup(self, passel: Iterable[str]) -> int:
        """
        Ensure the table exists and every possum in the passel has a row.

        New possums are inserted as "alive"; existing rows are left untouched.

        Args:
            passel: Possum names in the order they should be initialized

        Returns:
            Number of rows inserted
        """
        self.create_schema()

        inserted = 0
        for possum in passel:
            try:
                self._lookup(possum)
            except NotFound:
                self.logger.debug("Initializing possum", possum=possum, state=DEFAULT_STATE.value)
                with self._cursor("insert", possum) as cursor:
                    cursor.execute(
                        self._sql("INSERT INTO {table} (possum, state) VALUES ({ph}, {ph})"),
                        (possum, DEFAULT_STATE.value),
                    )
                    self.conn.commit()
                inserted += 1

        self.logger.info("State table initialized", inserted=inserted)
        return inserted

    def setup_from_environment(self, provider: EnvironmentProvider) -> int:
        """Resolve the passel from the environment and run ``setup``."""
        return self.setup(provider.passel())

    # -------- Reads --------
    def get_state(self, possum: str) -> str:
        """Return the persisted state of one possum."""
        return self._lookup(possum).state

    def get_passel_state(self, passel: Sequence[str] | Passel) -> dict[str, str]:
        """
        Return the state of every possum in the passel.

        Fails on the first possum without a row; no partial mapping is
        returned.

        Raises:
            InvalidArgument: the passel is empty
            NotFound: any possum has no row
        """
        if len(passel) == 0:
            raise InvalidArgument("Passel had 0 members", argument="passel", value=[])

        passel_state = {}
        for possum in passel:
            passel_state[possum] = self._lookup(possum).state
        return passel_state

    # -------- Writes --------
    def write_state(self, possum: str, desired_state: str) -> None:
        """
        Update the state of one possum.

        The state is validated before the store is touched. With
        ``strict_writes`` enabled an update that matches no row raises
        NotFound. Drivers that report changed rather than matched rows
        (MySQL without CLIENT.FOUND_ROWS) should run with
        ``strict_writes`` disabled.
        """
        state = PossumState.parse(desired_state)

        with self._cursor("write_state", possum) as cursor:
            cursor.execute(
                self._sql("UPDATE {table} SET state = {ph} WHERE possum = {ph}"),
                (state.value, possum),
            )
            rows_affected = cursor.rowcount
            self.conn.commit()

        if rows_affected == 0 and self.params.strict_writes:
            self.logger.warning("State write matched no rows", possum=possum)
            raise NotFound(
                f"Could not find possum {possum} in db",
                operation="write_state",
                possum=possum,
            )

        log_state_write(self.logger, possum, state.value, rows_affected)
