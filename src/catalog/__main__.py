import uvicorn


def main():
    uvicorn.run("catalog.app:app", host="0.0.0.0", port=8101, reload=True)


if __name__ == "__main__":
    main()
