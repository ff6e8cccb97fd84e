import sys
import logging
import traceback


class ShutdownHandler(logging.Handler):
    def emit(self, record):
        stack = traceback.format_exc()
        msg = f"msg: {record}\n stack: {stack}"
        print(msg, file=sys.stderr)
        logging.shutdown()
        sys.exit(1)


def logging_basic_config(filename=None, level=logging.INFO):
    format = "%(asctime)s - %(name)s [%(levelname)s] - %(message)s"
    # the JSON lines output goes to stdout, keep the logs apart
    if filename is not None:
        logging.basicConfig(level=level, format=format, filename=filename)
    else:
        logging.basicConfig(level=level, format=format, stream=sys.stderr)

    # add shutdown handler
    logging.getLogger().addHandler(ShutdownHandler(level=logging.FATAL))
