"""Debug logging to stderr and an optional file."""

import sys
from datetime import datetime

class DebugLogger:
    """Logger that writes debug output to stderr and, optionally, to a file in real-time.
    
    Nothing is ever written to stdout, which carries the branch report.
    """
    
    def __init__(self, log_file_path=None, console_debug=False):
        """Initialize the debug logger.
        
        Args:
            log_file_path (str, optional): Path to a debug log file
            console_debug (bool): Whether to also print to stderr
        """
        self.log_file_path = log_file_path
        self.console_debug = console_debug
        self.file_handle = None
        
        if log_file_path:
            try:
                # Line buffering for live updates
                self.file_handle = open(log_file_path, 'a', encoding='utf-8', buffering=1)
                self.log(f"Debug log started: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
            except OSError as e:
                print(f"Warning: Could not open debug log file: {e}", file=sys.stderr)
    
    def log(self, message):
        """Write a message to the debug log.
        
        Args:
            message (str): Message to log
        """
        timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
        log_line = f"[{timestamp}] {message}"
        
        if self.file_handle:
            try:
                self.file_handle.write(log_line + '\n')
                self.file_handle.flush()
            except OSError as e:
                print(f"Warning: Failed to write to debug log: {e}", file=sys.stderr)
        
        if self.console_debug:
            print(message, file=sys.stderr)
    
    def warning(self, message):
        """Log a warning. Warnings always reach stderr."""
        self.log(f"WARNING: {message}")
        if not self.console_debug:
            print(f"Warning: {message}", file=sys.stderr)
    
    def close(self):
        """Close the log file."""
        if self.file_handle:
            try:
                self.log(f"Debug log ended: {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
                self.file_handle.close()
            except OSError:
                pass
            self.file_handle = None
    
    def __del__(self):
        """Ensure file is closed on destruction."""
        self.close()
