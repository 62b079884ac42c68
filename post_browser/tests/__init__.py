from simple_logger import Slogger

# keep test runs from writing log files
Slogger.configure(enabled=False)
