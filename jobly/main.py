"""
Jobly - Command-Line Entry Point

Read-only access to companies and jobs from the terminal, handy for checking
what the API will serve.

Usage:
    python -m jobly.main [--verbose] COMMAND [OPTIONS]

Commands:
    companies [--min-employees N] [--max-employees N] [--name TEXT]
    company HANDLE
    jobs [--min-salary N] [--has-equity] [--title TEXT]
    job ID

Examples:
    # Companies with 100 to 500 employees:
    python -m jobly.main companies --min-employees 100 --max-employees 500

    # Jobs with equity whose title mentions "engineer":
    python -m jobly.main jobs --has-equity --title engineer

Exit Codes:
    0: Success
    1: Bad request or not found
    2: Fatal error (configuration, database connection, etc.)
"""

import argparse
import json
import logging
import sys
from typing import Any, Optional

from .config import ConfigError, load_settings
from .db_operations import JoblyDB
from .errors import BadRequestError, DatabaseError, NotFoundError
from .models import Company, Job

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[list[str]] = None) -> argparse.Namespace:
    """
    Parse command-line arguments.

    Returns:
        Parsed arguments namespace
    """
    parser = argparse.ArgumentParser(
        description='Query Jobly companies and jobs',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    companies = subparsers.add_parser('companies', help='List companies')
    companies.add_argument(
        '--min-employees',
        type=int,
        default=None,
        dest='min_employees',
        help='Minimum number of employees'
    )
    companies.add_argument(
        '--max-employees',
        type=int,
        default=None,
        dest='max_employees',
        help='Maximum number of employees'
    )
    companies.add_argument(
        '--name',
        type=str,
        default=None,
        help='Case-insensitive partial match on company name'
    )

    company = subparsers.add_parser('company', help='Show one company and its jobs')
    company.add_argument('handle', type=str)

    jobs = subparsers.add_parser('jobs', help='List jobs')
    jobs.add_argument(
        '--min-salary',
        type=int,
        default=None,
        dest='min_salary',
        help='Minimum salary'
    )
    jobs.add_argument(
        '--has-equity',
        action='store_true',
        dest='has_equity',
        help='Only jobs offering equity'
    )
    jobs.add_argument(
        '--title',
        type=str,
        default=None,
        help='Case-insensitive partial match on job title'
    )

    job = subparsers.add_parser('job', help='Show one job and its company')
    job.add_argument('id', type=int)

    return parser.parse_args(argv)


def run_command(db, args: argparse.Namespace) -> Any:
    """
    Dispatch a parsed command to the models.

    Args:
        db: Database interface
        args: Parsed arguments

    Returns:
        JSON-serialisable result of the command
    """
    if args.command == 'companies':
        filters = (args.min_employees, args.max_employees, args.name)
        if all(value is None for value in filters):
            return Company(db).find_all()
        return Company(db).find_by_filters(
            min_employees=args.min_employees,
            max_employees=args.max_employees,
            name_like=args.name,
        )

    if args.command == 'company':
        return Company(db).get(args.handle)

    if args.command == 'jobs':
        return Job(db).find_all(
            min_salary=args.min_salary,
            has_equity=args.has_equity,
            title=args.title,
        )

    if args.command == 'job':
        return Job(db).get(args.id)

    raise BadRequestError(f"Unknown command: {args.command}")


def main(argv: Optional[list[str]] = None) -> int:
    """
    Main entry point for the Jobly CLI.

    Returns:
        Exit code (0 = success, 1 = bad request / not found, 2 = fatal error)
    """
    args = parse_args(argv)

    try:
        settings = load_settings()
    except ConfigError as e:
        logging.basicConfig(level=logging.INFO)
        logger.error(f"Configuration error: {e}")
        return 2  # Fatal error - cannot proceed without database

    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )

    try:
        logger.info("Connecting to database")
        db = JoblyDB(settings.database_url)

        result = run_command(db, args)
        print(json.dumps(result, indent=2, default=str))
        return 0

    except (BadRequestError, NotFoundError) as e:
        logger.error(f"{type(e).__name__}: {e.message}")
        return 1

    except DatabaseError as e:
        logger.error(f"Database error: {e}")
        return 2  # Fatal error

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130  # Standard Unix exit code for SIGINT

    except Exception as e:
        logger.error(
            "Unexpected fatal error",
            extra={
                'error': str(e),
                'error_type': type(e).__name__,
            },
            exc_info=True
        )
        return 2  # Fatal error


if __name__ == '__main__':
    sys.exit(main())
