# Copyright (c) 2025 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""This module includes utilities functions for the BOM decomposer."""

import logging
import time

import requests
from requests.models import Response

from bom_decomposer.config.defaults import defaults

logger: logging.Logger = logging.getLogger(__name__)

# Status codes with which artifact repositories and their CDNs ask clients to try again later.
RETRY_STATUS_CODES = {429, 502, 503, 504}


def send_get_http_raw(
    url: str,
    headers: dict | None = None,
    timeout: int | None = None,
    check_response_fails: bool = True,
) -> Response | None:
    """Send the GET HTTP request with the given url and headers.

    Responses asking to try again later are retried up to ``[requests] error_retries`` times, waiting for
    the delay given by their ``Retry-After`` header, if any.

    Parameters
    ----------
    url : str
        The url of the request.
    headers : dict | None
        The dict that describes the headers of the request.
    timeout: int | None
        The request timeout (optional).
    check_response_fails: bool
        When True, a response with an error status code is returned so that the caller can inspect it.
        Otherwise, None is returned for such responses.

    Returns
    -------
    Response | None
        The response, or None if the request could not be sent or failed and ``check_response_fails`` is False.
    """
    logger.debug("GET - %s", url)
    if not timeout:
        timeout = defaults.getint("requests", "timeout", fallback=10)
    error_retries = defaults.getint("requests", "error_retries", fallback=5)
    retry_counter = error_retries
    while True:
        try:
            response = requests.get(url=url, headers=headers, timeout=timeout)
        except requests.exceptions.RequestException as error:
            logger.debug(error)
            return None

        if response.status_code == 200:
            return response

        logger.debug("Receiving error code %s from server.", response.status_code)
        if response.status_code not in RETRY_STATUS_CODES:
            return response if check_response_fails else None
        if retry_counter <= 0:
            logger.debug("Maximum retries reached: %s", error_retries)
            return response if check_response_fails else None
        retry_counter = retry_counter - 1
        wait_retry_after(response, timeout)


def wait_retry_after(response: Response, max_wait: float) -> None:
    """Wait for the number of seconds given by the ``Retry-After`` header of the response, at most ``max_wait``.

    Parameters
    ----------
    response : Response
        The latest response from the server.
    max_wait : float
        The maximum number of seconds to wait.
    """
    retry_after = response.headers.get("Retry-After", "")
    if not retry_after:
        return

    try:
        delay = float(retry_after)
    except ValueError:
        # The HTTP-date form is not supported.
        logger.debug("Ignoring Retry-After=%s in the response's header.", retry_after)
        return

    time_to_sleep = min(delay, max_wait)
    if time_to_sleep > 0:
        logger.info("Server asked to retry later. Sleep for %s seconds", time_to_sleep)
        time.sleep(time_to_sleep)
