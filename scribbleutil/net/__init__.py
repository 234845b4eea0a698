"""URL escaping, single HTTP requests and an asynchronous HTTP client."""