"""
Unit tests for the formatter module.

Tests limine.conf rendering.
"""

import unittest

from liminegen.analyzer import Entry
from liminegen.config import Settings
from liminegen.formatter import format_entry, render_limine


class TestFormatEntry(unittest.TestCase):
    """Tests for format_entry function."""
    
    def test_entry_block(self):
        """Test the five lines of an entry block."""
        entry = Entry(
            title="Linux - 6.10.5-arch1",
            kernel_path="/vmlinuz-6.10.5-arch1",
            initrd_path="/initramfs-6.10.5-arch1.img",
            version="6.10.5-arch1",
        )
        
        block = format_entry(entry, Settings(cmdline="root=/dev/sda1"))
        
        self.assertEqual(block.splitlines(), [
            "/Linux - 6.10.5-arch1",
            "    protocol: linux",
            "    kernel_path: boot():/vmlinuz-6.10.5-arch1",
            "    kernel_cmdline: root=/dev/sda1",
            "    module_path: boot():/initramfs-6.10.5-arch1.img",
        ])
        self.assertTrue(block.endswith("\n"))
    
    def test_cmdline_is_literal(self):
        """Test that the command line is not escaped."""
        entry = Entry(title="Linux", kernel_path="/vmlinuz-linux", initrd_path="/initramfs-linux.img")
        
        block = format_entry(entry, Settings(cmdline='root="LABEL=arch root" rw #x'))
        
        self.assertIn('    kernel_cmdline: root="LABEL=arch root" rw #x\n', block)


class TestRenderLimine(unittest.TestCase):
    """Tests for render_limine function."""
    
    def setUp(self):
        """Set up test fixtures."""
        self.settings = Settings(cmdline="root=/dev/sda1", timeout_s=5)
    
    def test_single_entry(self):
        """Test rendering of one complete pair."""
        entries = [Entry(
            title="Linux - 6.10.5-arch1",
            kernel_path="/vmlinuz-6.10.5-arch1",
            initrd_path="/initramfs-6.10.5-arch1.img",
            version="6.10.5-arch1",
        )]
        
        output = render_limine(entries, self.settings)
        
        self.assertEqual(
            output,
            "timeout: 5\n"
            "\n"
            "/Linux - 6.10.5-arch1\n"
            "    protocol: linux\n"
            "    kernel_path: boot():/vmlinuz-6.10.5-arch1\n"
            "    kernel_cmdline: root=/dev/sda1\n"
            "    module_path: boot():/initramfs-6.10.5-arch1.img\n",
        )
    
    def test_no_entries(self):
        """Test that an empty entry list yields only the header."""
        self.assertEqual(render_limine([], self.settings), "timeout: 5\n\n")
    
    def test_timeout_value(self):
        """Test the timeout header."""
        output = render_limine([], Settings(cmdline="quiet", timeout_s=0))
        
        self.assertTrue(output.startswith("timeout: 0\n\n"))
    
    def test_blocks_are_not_separated(self):
        """Test that consecutive blocks follow each other directly."""
        entries = [
            Entry(title="Linux - 6.1.0", kernel_path="/vmlinuz-6.1.0", initrd_path="/initrd-6.1.0.img", version="6.1.0"),
            Entry(title="Linux", kernel_path="/vmlinuz-linux", initrd_path="/initramfs-linux.img"),
        ]
        
        output = render_limine(entries, self.settings)
        
        self.assertIn("module_path: boot():/initrd-6.1.0.img\n/Linux\n", output)
        self.assertEqual(output.count("    protocol: linux\n"), 2)
        self.assertNotIn("\n\n/Linux\n", output)


if __name__ == "__main__":
    unittest.main()
