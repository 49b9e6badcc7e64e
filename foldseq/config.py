import os
from dotenv import dotenv_values


def load_config():
    config = {
        "FOLDSEQ_OPERATOR": "add",
        "FOLDSEQ_LOG_LEVEL": "INFO",
        **dotenv_values(".env"),
        **os.environ,
    }

    return config
