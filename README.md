# packcalc

A small HTTP service that works out how to fill an order from a fixed set of
pack sizes. Only whole packs are shipped. The choice is:

1. the smallest total number of items that is not below the order amount
   (so an exact match is always taken when one exists);
2. for that total, the fewest packs;
3. among equally few packs, the larger pack sizes.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
packcalc
```

Options:

* `--static DIR` — directory of static UI files (default `./web`). Files in it
  are served by name from the site root, and `/` serves its `index.html`.

Settings come from, in order of precedence:

* the environment variables `PORT` and `PACK_SIZES` (empty values are ignored);
* the first of `config.yaml`, `config.yml` or `config` found in the current
  directory, then in `/root`, read as YAML;
* built-in defaults: port `:3000` and pack sizes `250,500,1000,2000,5000`.

A sample `config.yaml`:

```yaml
port: "3000"
pack_sizes: "250,500,1000,2000,5000"
```

`pack_sizes` may also be given as a YAML list. A plain number for the port,
such as `4000`, is read as `:4000`; an address such as `localhost:4000` is used
as it is, and an empty host means all interfaces. Pack sizes that are not
positive integers are skipped; if none are left, the defaults are used. A
configuration file that cannot be read or does not hold a mapping stops the
server with an error.

Cross-origin requests are allowed from `http://localhost:3000` and
`http://localhost:63342` for the methods `GET`, `POST` and `OPTIONS` with the
`Content-Type` header.

## HTTP API

| Method | Path              | Body                          | Response                                         |
|--------|-------------------|-------------------------------|--------------------------------------------------|
| POST   | `/api/calculate`  | `{"orderAmount": 263}`        | `{"packs": {"500": 1}, "totalItems": 500}`       |
| GET    | `/api/pack-sizes` |                               | `{"packSizes": [250, 500, 1000]}`                |
| POST   | `/api/pack-sizes` | `{"packSizes": [23, 31, 53]}` | `{"message": "Pack sizes updated successfully"}` |

Request bodies must be JSON objects sent with a JSON content type. A missing
`orderAmount` counts as `0` and a missing `packSizes` as an empty list. A body
that cannot be parsed, or whose fields are not integers (a list of integers for
`packSizes`), gets `400` with `{"error": "Invalid request"}`. A calculation that
fails, for example on a negative order amount or when no positive pack size is
set, gets `500` with the reason in `error`.

## What it does not do

Pack sizes are kept in memory only. Sizes set through `POST /api/pack-sizes`
are lost when the server stops; on start it always begins from the configured
sizes.

## Using it as a library

```python
from packcalc.domain import calculate_packs

packs, total = calculate_packs([23, 31, 53], 500000)
# packs == {53: 9429, 31: 7, 23: 2}, total == 500000
```

`calculate_packs` raises `InvalidOrderAmountError` for a negative amount,
`NoPackSizesError` when no positive pack size is given, and
`InsufficientPackSizesError` when the order cannot be filled. All three derive
from `PackError`, itself a `ValueError`.

Settings can be loaded with `packcalc.config.load_config(search_paths, environ)`,
which returns a `Config` with `port` and `pack_sizes`.

To put the service together yourself:

```python
from packcalc.logger import Logger
from packcalc.repository import InMemoryPackRepository
from packcalc.service import CalculatePacksService
from packcalc.web import create_app

service = CalculatePacksService(InMemoryPackRepository([250, 500, 1000]))
app = create_app(service, Logger(), static_folder=None)
```

or, from a `Config`, `packcalc.app.build_app(config, static_folder)`.