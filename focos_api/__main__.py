from focos_api.adapters.web.server import main

if __name__ == "__main__":
    main()
