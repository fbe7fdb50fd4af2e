from dafurn.seed.users import main

if __name__ == "__main__":
    main()
