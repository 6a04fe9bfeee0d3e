import os
import pwd
from dataclasses import dataclass
from typing import Iterable, Iterator


MIN_HUMAN_UID: int = 1000
DISABLED_SHELLS: tuple[str, ...] = ("/usr/sbin/nologin", "/bin/false")
HOME_ROOT: str = "/home"


@dataclass(frozen=True)
class UserRecord:
    name: str
    uid: int
    shell: str
    has_home_dir: bool


def iter_user_records(
        entries: Iterable[pwd.struct_passwd] | None = None,
        home_root: str = HOME_ROOT
) -> Iterator[UserRecord]:
    """
    Yield a UserRecord for each entry of the account database.

    :param entries: iterable of passwd entries. Defaults to 'pwd.getpwall()', which goes through NSS like 'getent passwd'.
    :param home_root: str, the directory under which '<home_root>/<name>' must exist for 'has_home_dir'.
    """

    if entries is None:
        entries = pwd.getpwall()

    for entry in entries:
        yield UserRecord(
            name=entry.pw_name,
            uid=entry.pw_uid,
            shell=entry.pw_shell,
            has_home_dir=os.path.isdir(os.path.join(home_root, entry.pw_name)),
        )


def is_login_user(record: UserRecord) -> bool:
    return record.uid >= MIN_HUMAN_UID and record.shell not in DISABLED_SHELLS


def iter_eligible_users(
        entries: Iterable[pwd.struct_passwd] | None = None,
        home_root: str = HOME_ROOT
) -> Iterator[str]:
    """
    Lazily yield the names of accounts that can log in over RDP:
    human-range UID, a login shell, and an existing home directory.
    Order is the account database order.
    """

    for record in iter_user_records(entries, home_root=home_root):
        if is_login_user(record) and record.has_home_dir:
            yield record.name
