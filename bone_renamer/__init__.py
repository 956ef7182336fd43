"""Bone renamer package.

Prefixes the node (bone) names inside text animation exports (JMA, JMM, JMO,
JMR, JMT, JMW, JMZ) so assets can move between two games' skeleton naming
conventions. The parser lives in :mod:`bone_renamer.jma`; the batch driver in
:mod:`bone_renamer.batch`; the command line in :mod:`bone_renamer.cli`.
"""

__all__ = ["batch", "cli", "config", "jma"]
__version__ = "0.1.0"
