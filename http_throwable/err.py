import sys
import traceback

def display_throwable_error(_e):
    print("", file=sys.stderr)
    print("\033[1m" + '  http-throwable error !' + '\033[0m', file=sys.stderr)
    print(f"    {_e}", file=sys.stderr)
    print("", file=sys.stderr)
    _t = traceback.format_exception(type(_e), _e, _e.__traceback__)
    print("".join(_t), file=sys.stderr)
