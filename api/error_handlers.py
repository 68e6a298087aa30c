import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from api.schemas import ConversionResponse
from domain.exceptions.currency import ConversionRateError, CurrencyNotFoundError

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
	@app.exception_handler(CurrencyNotFoundError)
	async def currency_not_found_handler(request: Request, exc: CurrencyNotFoundError):
		return JSONResponse(status_code=404, content={'detail': str(exc), 'symbol': exc.symbol})

	@app.exception_handler(ConversionRateError)
	async def conversion_rate_handler(request: Request, exc: ConversionRateError):
		logger.warning(f'Conversion failed: {exc}')
		unconverted = ConversionResponse.from_result(exc.result)
		return JSONResponse(
			status_code=422,
			content={'detail': str(exc), 'result': unconverted.model_dump(mode='json')},
		)
