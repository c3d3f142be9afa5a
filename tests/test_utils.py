"""
Unit tests for utility functions.
"""

import unittest
from io import StringIO
from unittest.mock import patch, MagicMock

from liminegen.utils import write_output


class TestWriteOutput(unittest.TestCase):
    """Test the single-write output helper."""
    
    def test_write_to_stream(self):
        """Test writing the full text to a stream."""
        stream = StringIO()
        
        write_output("timeout: 5\n\n", stream)
        
        self.assertEqual(stream.getvalue(), "timeout: 5\n\n")
    
    @patch('sys.stdout', new_callable=StringIO)
    def test_defaults_to_stdout(self, mock_stdout):
        """Test that stdout is used when no stream is given."""
        write_output("timeout: 5\n\n")
        
        self.assertEqual(mock_stdout.getvalue(), "timeout: 5\n\n")
    
    def test_single_write(self):
        """Test that the text is written in one call and flushed."""
        stream = MagicMock()
        stream.write.return_value = 12
        
        write_output("timeout: 5\n\n", stream)
        
        stream.write.assert_called_once_with("timeout: 5\n\n")
        stream.flush.assert_called_once()
    
    def test_short_write(self):
        """Test that a short write is an I/O failure."""
        stream = MagicMock()
        stream.write.return_value = 3
        
        with self.assertRaises(OSError):
            write_output("timeout: 5\n\n", stream)
    
    def test_write_error(self):
        """Test that a failing write propagates."""
        stream = MagicMock()
        stream.write.side_effect = BrokenPipeError()
        
        with self.assertRaises(OSError):
            write_output("timeout: 5\n\n", stream)


if __name__ == "__main__":
    unittest.main()
