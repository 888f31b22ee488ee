# Copyright 2022 4Paradigm
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#   http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
run external commands and capture their output
"""

import logging
import subprocess
from typing import Optional, Sequence


class CommandError(Exception):
    '''
    a command could not be started, timed out or exited with non-zero status
    '''

    def __init__(self, args: Sequence[str], reason: str, returncode: Optional[int] = None, stderr: str = ""):
        self.command = list(args)
        self.returncode = returncode
        self.stderr = stderr
        message = f"{' '.join(self.command)}: {reason}"
        if stderr:
            message = f"{message}: {stderr.strip()}"
        super().__init__(message)


class CommandRunner(object):
    '''
    callable that runs a command without stdin and returns its stdout as text
    '''
    timeout: Optional[float]

    def __init__(self, timeout: Optional[float] = None):
        self.timeout = timeout

    def __call__(self, args: Sequence[str]) -> str:
        logging.debug("running %s", args)
        try:
            proc = subprocess.run(
                list(args),
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
                timeout=self.timeout,
                check=False,
            )
        except subprocess.TimeoutExpired as e:
            raise CommandError(args, f"timed out after {e.timeout} seconds") from e
        except OSError as e:
            raise CommandError(args, str(e)) from e

        if proc.returncode != 0:
            raise CommandError(args, f"exit status {proc.returncode}", proc.returncode, proc.stderr or "")
        return proc.stdout
