import arraydeque
from arraydeque.tool.ansi_print import enable_log


def pytest_report_header():
    return "arraydeque-%s from %s" % (arraydeque.__version__,
                                      arraydeque.__file__)

def pytest_addoption(parser):
    group = parser.getgroup("arraydeque options")
    group.addoption('--deque-log', action="store_true", dest="deque_log",
           default=False,
           help="print every slot array reflow on stderr")

def pytest_configure(config):
    if config.option.deque_log:
        enable_log()
