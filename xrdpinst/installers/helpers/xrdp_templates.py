"""
Templates of the files xrdp reads at startup.

Each template is a complete file; it is rendered with the discovered HostInfo and written over the
existing file as a whole.
"""

from .infra.networks import HostInfo


XRDP_INI_TEMPLATE: str = """\
[globals]
bitmap_cache=yes
bitmap_compression=yes
port={xrdp_port}
crypt_level=low
channel_code=1
max_bpp=24
security_layer=negotiate
ssl_protocols=TLSv1.2, TLSv1.3
certificate=
key_file=
allow_channels=true
allow_multimon=true
bitmap_cache=true
bitmap_compression=true
bulk_compression=true
max_bandwidth=auto
use_compression=yes

[xrdp1]
name=XRDP Session
lib=libvnc.so
username=ask
password=ask
ip={host.local_ip}
port=-1
code=20

"""


SESMAN_INI_TEMPLATE: str = """\
[Globals]
ListenAddress={host.local_ip}
ListenPort={sesman_port}
EnableUserWindowManager=true
UserWindowManager=startwm.sh
DefaultWindowManager=startwm.sh

[Security]
AllowRootLogin=false
MaxLoginRetry=4
TerminalServerUsers=tsusers
TerminalServerAdmins=tsadmin
AlwaysGroupCheck=false

[Sessions]
X11DisplayOffset=10
MaxSessions=50
KillDisconnected=false
IdleTimeLimit=0
DisconnectedTimeLimit=0

[Logging]
LogFile=/var/log/xrdp-sesman.log
LogLevel=INFO
EnableSyslog=true
SyslogLevel=INFO

"""


STARTWM_SH_TEMPLATE: str = """\
#!/bin/sh
if [ -r /etc/default/locale ]; then
    . /etc/default/locale
    export LANG LANGUAGE
fi

# Start the session
if [ -f /etc/X11/Xsession ]; then
    . /etc/X11/Xsession
else
    . /usr/bin/x-session-manager
fi
"""


TEMPLATES: dict[str, str] = {
    "xrdp.ini": XRDP_INI_TEMPLATE,
    "sesman.ini": SESMAN_INI_TEMPLATE,
    "startwm.sh": STARTWM_SH_TEMPLATE,
}


def render_template(
        name: str,
        host: HostInfo,
        xrdp_port: int = 3389,
        sesman_port: int = 3350,
) -> str:
    """
    Render one of the named templates.

    :param name: str, the file name of the template: 'xrdp.ini', 'sesman.ini' or 'startwm.sh'.
    :param host: HostInfo, the discovered host values.
    :param xrdp_port: int, the port xrdp listens on.
    :param sesman_port: int, the port the session manager listens on.
    :return: str, the complete file content.
    """

    try:
        template: str = TEMPLATES[name]
    except KeyError:
        raise ValueError(f"Unknown template '{name}'.")

    return template.format(host=host, xrdp_port=xrdp_port, sesman_port=sesman_port)
