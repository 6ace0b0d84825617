"""Usage text shown when the command line is incomplete."""

EXAMPLE_DIRECTORY = "~/Pictures/"
EXAMPLE_EXTENSION = ".png"

USAGE = f"""renumfiles [targetPath] /F[format]
ex.
\trenumfiles {EXAMPLE_DIRECTORY}*{EXAMPLE_EXTENSION} /F000

\tBefore:
\t\t{EXAMPLE_DIRECTORY}picture1{EXAMPLE_EXTENSION}
\t\t{EXAMPLE_DIRECTORY}picture10.jpg
\t\t{EXAMPLE_DIRECTORY}picture10{EXAMPLE_EXTENSION}
\t\t{EXAMPLE_DIRECTORY}picture2{EXAMPLE_EXTENSION}

\tAfter:
\t\t{EXAMPLE_DIRECTORY}picture001{EXAMPLE_EXTENSION}
\t\t{EXAMPLE_DIRECTORY}picture10.jpg
\t\t{EXAMPLE_DIRECTORY}picture010{EXAMPLE_EXTENSION}
\t\t{EXAMPLE_DIRECTORY}picture002{EXAMPLE_EXTENSION}

The format flag may also be written -F, /f or -f.
Supported formats:
\tStandard: D, X, B, N, F, G, E, P, C followed by an optional precision (e.g. D4, X8)
\tCustom:   0 and # digit placeholders, "," grouping, "." decimal point,
\t          % and per mille scaling, E+0 exponents, 'quoted' literals and ; sections
\t          (e.g. 000, #,##0, 0.0E+0)
See also: Standard numeric format strings | Microsoft Docs
https://docs.microsoft.com/dotnet/standard/base-types/standard-numeric-format-strings"""
