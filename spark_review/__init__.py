# review notes on the spark sql / dataframe api
## every chapter is a module that can be read top to bottom and run with python -m
## the snippets are wrapped in small functions so that they can be called (and tested) one by one
from spark_review.session import create_session, new_session, run_job, session_info, stop_session

__version__ = "0.1.0"

__all__ = ["create_session", "new_session", "run_job", "session_info", "stop_session"]
