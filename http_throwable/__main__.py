from http_throwable.main import throwable_command_line

if __name__ == "__main__":
    throwable_command_line()
