from fastapi import FastAPI

from db import init_db
from routes import forecast, transactions

app = FastAPI(title="Budget Forecast")


@app.on_event("startup")
def startup():
    init_db()


app.include_router(transactions.router)
app.include_router(forecast.router)
