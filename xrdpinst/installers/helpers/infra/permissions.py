import os


def is_admin() -> bool:
    """
    Function checks if the current process runs with root privileges.
    :return: bool, True if the effective user id is 0.
    """

    return os.geteuid() == 0
