import sys

from maven_essentials.main import main

if __name__ == "__main__":
    main(sys.argv[1:])
