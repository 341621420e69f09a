HELP_TEXT = """\
Open files with 'Synalyze It!' (synalyze) and 'Hex Fiend' (hexf) from one command.

SYNOPSIS:
    syn [-x|-xo] [-s|-ss] [file1 file2 ...]
    syn -c [-ss] file1 file2

INFO:
    'synalyze' (installed by 'Synalyze It!') and 'hexf' (installed by 'Hex Fiend')
    must be available on the $PATH.
    Files open in 'Synalyze It!' by default. Use `-xo` to open them in 'Hex Fiend'
    only, or `-x` to open them in both applications.
    A file that does not exist is created empty and opened. Strict mode `-s` stops
    on the first missing file instead; soft-strict mode `-ss` leaves missing files
    out and opens the rest.
    With no files, the selected application opens an empty Untitled document
    (turn off the welcome panel in the 'Synalyze It!' preferences).
    Compare mode `-c` is strict by default; add `-ss` to create missing files.

OPTIONS:
    -c,  --compare          Compare two files in 'Hex Fiend'. Fails on missing
                            files unless `-ss` is given, which creates them.

    -s,  --strict           Fail when a file does not exist.
    -ss, --soft-strict      Skip files that do not exist and open the rest.

    -x,  --hexf             Open files in 'Hex Fiend' as well as 'Synalyze It!'.
    -xo, --hexf-only        Open files in 'Hex Fiend' only.

    -h,  --help             Print this message.
    -v,  --version          Print the syn version.

EXAMPLES:
    syn file.txt                    Open file.txt in 'Synalyze It!'
    syn -x file.txt                 Open file.txt in 'Synalyze It!' and 'Hex Fiend'
    syn -xo file.txt                Open file.txt in 'Hex Fiend'
    syn -c -ss file1 file2          Compare file1 and file2, creating missing ones
    syn -c file1 file2              Compare file1 and file2, failing if one is missing
    syn -x -ss file1 file2 file3    Open the existing files among file1..file3 in both
"""
