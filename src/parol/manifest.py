# Copyright (c) 2024 Seb Holzapfel <me@sebholzapfel.com>
#
# SPDX-License-Identifier: CERN-OHL-S-2.0

"""
Manifest written alongside generated verilog, describing what was built
and with which video timings, so that a netlist can be traced back to
the source revision that produced it.
"""

import json

from dataclasses import dataclass, field
from dataclasses_json import dataclass_json
from typing import List, Optional

import git

from . import font


def repo_sha():
    """Short SHA of the enclosing git repository, or 'unknown' outside one."""
    try:
        repo = git.Repo(search_parent_directories=True)
    except (git.InvalidGitRepositoryError, git.NoSuchPathError):
        return "unknown"
    return repo.head.object.hexsha[:6]


@dataclass_json
@dataclass
class VideoTimings:
    modeline: str
    pixel_clk_mhz: float
    refresh_rate: float
    h_active: int
    v_active: int


@dataclass_json
@dataclass
class BuildManifest:
    name: str
    sha: str
    video: VideoTimings
    verilog: Optional[str] = None
    text: List[str] = field(default_factory=lambda: list(font.LINES))

    @staticmethod
    def from_modeline(name, modeline_name, modeline, sha=None):
        return BuildManifest(
            name=name,
            sha=repo_sha() if sha is None else sha,
            video=VideoTimings(
                modeline=modeline_name,
                pixel_clk_mhz=modeline.pixel_clk_mhz,
                refresh_rate=round(modeline.refresh_rate, 2),
                h_active=modeline.h_active,
                v_active=modeline.v_active,
            ))

    def write_to_path(self, manifest_path):
        # Drop all keys with None values (optional fields)
        d = {k: v for k, v in self.to_dict().items() if v is not None}
        with open(manifest_path, "w") as f:
            f.write(json.dumps(d, indent=2))
