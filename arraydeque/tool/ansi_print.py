"""
A color print.
"""

import py
from py.io import ansi_print


class AnsiLog:

    KW_TO_COLOR = {
        # color supress
        'red': ((31,), True),
        'bold': ((1,), True),
        'WARNING': ((31,), False),
        'ERROR': ((1, 31), False),
        'info': ((35,), False),
        'grow': ((32,), False),
        'shrink': ((33,), False),
        'reset': ((34,), False),
    }

    def __init__(self, kw_to_color={}, file=None):
        self.kw_to_color = self.KW_TO_COLOR.copy()
        self.kw_to_color.update(kw_to_color)
        self.file = file

    def __call__(self, msg):
        keywords = []
        esc = []
        for kw in msg.keywords:
            color, supress = self.kw_to_color.get(kw, (None, False))
            if color:
                esc.extend(color)
            if not supress:
                keywords.append(kw)
        esc = tuple(esc)
        for line in msg.content().splitlines():
            ansi_print("[%s] %s" % (":".join(keywords), line), esc,
                       file=self.file)

ansi_log = AnsiLog()


def enable_log(keywords="arraydeque", consumer=ansi_log):
    py.log.setconsumer(keywords, consumer)

def disable_log(keywords="arraydeque"):
    py.log.setconsumer(keywords, None)
