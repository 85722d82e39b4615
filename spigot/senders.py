# spigot/senders.py
"""Destinations for generated log lines."""

import logging
import os
import socket
import sys
from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from colorama import Fore, Style, init

from .config import OutputConfig
from .errors import ConfigError

# Initialize colorama for Windows compatibility
init(autoreset=True)


class MessageSender(ABC):
    """Takes one rendered line at a time."""

    @abstractmethod
    def send(self, line: bytes) -> bool:
        """Deliver ``line``; False means it was dropped."""

    @abstractmethod
    def close(self) -> None:
        """Release sockets or file handles."""


class ConsoleSender(MessageSender):
    """Print lines to stdout, one color per runner."""

    PALETTE = [Fore.GREEN, Fore.CYAN, Fore.YELLOW, Fore.MAGENTA, Fore.BLUE, Fore.WHITE]

    def __init__(self, color: bool = True, index: int = 0, stream=None):
        self.stream = stream or sys.stdout
        self.color = self.PALETTE[index % len(self.PALETTE)] if color else ''

    def send(self, line: bytes) -> bool:
        try:
            text = line.decode('utf-8')
            if self.color:
                text = f"{self.color}{text}{Style.RESET_ALL}"
            print(text, file=self.stream)
            return True
        except (OSError, UnicodeDecodeError) as e:
            logging.error(f"Console write failed: {e}")
            return False

    def close(self) -> None:
        pass


class UDPSender(MessageSender):
    """One datagram per line."""

    def __init__(self, host: str = "127.0.0.1", port: int = 514):
        self.address = (host, port)
        self.socket = socket.socket(socket.AF_INET, socket.SOCK_DGRAM)
        logging.info(f"Sending UDP to {host}:{port}")

    def send(self, line: bytes) -> bool:
        try:
            self.socket.sendto(line, self.address)
            return True
        except OSError as e:
            logging.error(f"UDP datagram to {self.address[0]}:{self.address[1]} dropped: {e}")
            return False

    def close(self) -> None:
        self.socket.close()


class TCPSender(MessageSender):
    """Newline-framed lines over one TCP stream; reconnects on the next send after a drop."""

    def __init__(self, host: str = "127.0.0.1", port: int = 514):
        self.address = (host, port)
        self.socket: Optional[socket.socket] = None
        self._connect()

    def _connect(self) -> bool:
        try:
            self.socket = socket.create_connection(self.address)
        except OSError as e:
            logging.error(f"Cannot connect to {self.address[0]}:{self.address[1]}: {e}")
            self.socket = None
            return False
        logging.info(f"Sending TCP to {self.address[0]}:{self.address[1]}")
        return True

    def send(self, line: bytes) -> bool:
        if self.socket is None and not self._connect():
            return False

        try:
            self.socket.sendall(line + b"\n")
            return True
        except OSError as e:
            logging.warning(f"TCP stream to {self.address[0]}:{self.address[1]} lost: {e}")
            self.close()
            return False

    def close(self) -> None:
        if self.socket:
            self.socket.close()
            self.socket = None


class FileSender(MessageSender):
    """Append lines to a file, moving it aside once it passes ``max_size_mb``."""

    def __init__(self, file_path: str, max_size_mb: int = 100, rotation: bool = True):
        self.file_path = file_path
        self.max_size_bytes = max_size_mb * 1024 * 1024
        self.rotation = rotation

        directory = os.path.dirname(file_path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        self.file_handle = open(file_path, 'ab')
        logging.info(f"Writing lines to {file_path}")

    def _rotate(self) -> None:
        self.file_handle.close()
        rotated_path = f"{self.file_path}.{datetime.now():%Y%m%d_%H%M%S}"
        os.rename(self.file_path, rotated_path)
        self.file_handle = open(self.file_path, 'ab')
        logging.info(f"Rotated {self.file_path} to {rotated_path}")

    def send(self, line: bytes) -> bool:
        try:
            if self.rotation and self.file_handle.tell() > self.max_size_bytes:
                self._rotate()
            self.file_handle.write(line + b"\n")
            self.file_handle.flush()
            return True
        except OSError as e:
            logging.error(f"Writing to {self.file_path} failed: {e}")
            return False

    def close(self) -> None:
        if self.file_handle:
            self.file_handle.close()
            self.file_handle = None


def create_sender(output: OutputConfig, index: int = 0) -> MessageSender:
    """Build the sender for a runner's output section."""
    mode = output.mode.lower()

    if mode == 'console':
        return ConsoleSender(output.color, index)
    if mode == 'udp':
        return UDPSender(output.host, output.port)
    if mode == 'tcp':
        return TCPSender(output.host, output.port)
    if mode == 'file':
        return FileSender(output.file_path, output.max_file_size_mb, output.file_rotation)
    raise ConfigError(f"unknown output mode '{output.mode}'")
