"""TTS Scripts - round-trip Tabletop Simulator save scripts through plain files.

`extract` writes every object's Lua script and XML UI out of a save into a
directory of files that ordinary editors and version control can handle;
`pack` reads them back into the save. The package is split like this:

- **models/**: Scriptable node wrappers over the parsed save (document, objects)
- **persistence/**: Save and sidecar path resolution, JSON and text file I/O
- **validation/**: Pre-walk check that every object can be named on disk
- **commands/**: The extract and pack walkers and their CLI handlers
- **errors**: Typed error hierarchy mapped to exit codes
"""

__version__ = "1.0.0"
